"""Tests for status request schemas."""

import pytest
from pydantic import ValidationError

from taskboard_svc.models.status import DEFAULT_STATUS_COLOR
from taskboard_svc.schemas.status import StatusCreate, StatusUpdate


class TestStatusCreate:
    def test_snake_case_fields(self):
        status = StatusCreate(board_id=1, status_key="qa", status_label="QA", status_color="#ABCDEF")
        assert (status.board_id, status.status_key, status.status_label, status.status_color) == (
            1, "qa", "QA", "#ABCDEF"
        )

    def test_camel_case_fields(self):
        status = StatusCreate.model_validate(
            {"boardId": "2", "statusKey": "qa", "statusLabel": "QA", "statusColor": "#00ff00"}
        )
        assert status.board_id == 2
        assert status.status_key == "qa"
        assert status.status_label == "QA"
        assert status.status_color == "#00ff00"

    def test_camel_case_takes_precedence(self):
        status = StatusCreate.model_validate(
            {"board_id": 1, "boardId": 5, "status_key": "a", "statusKey": "b", "status_label": "L"}
        )
        assert status.board_id == 5
        assert status.status_key == "b"

    def test_color_defaults(self):
        status = StatusCreate(board_id=1, status_key="qa", status_label="QA")
        assert status.status_color == DEFAULT_STATUS_COLOR

    @pytest.mark.parametrize("color", ["red", "#12345", "#1234567", "123456", "#GGGGGG"])
    def test_invalid_color_rejected(self, color):
        with pytest.raises(ValidationError) as exc_info:
            StatusCreate(board_id=1, status_key="qa", status_label="QA", status_color=color)
        assert exc_info.value.errors()[0]["loc"] == ("status_color",)

    def test_board_id_must_be_integer(self):
        with pytest.raises(ValidationError) as exc_info:
            StatusCreate(board_id="abc", status_key="qa", status_label="QA")
        assert exc_info.value.errors()[0]["loc"] == ("board_id",)

    def test_key_and_label_limits(self):
        with pytest.raises(ValidationError):
            StatusCreate(board_id=1, status_key="k" * 51, status_label="QA")
        with pytest.raises(ValidationError):
            StatusCreate(board_id=1, status_key="qa", status_label="l" * 101)
        with pytest.raises(ValidationError):
            StatusCreate(board_id=1, status_key="  ", status_label="QA")


class TestStatusUpdate:
    def test_empty_payload_has_no_fields_set(self):
        assert StatusUpdate().model_dump(exclude_unset=True) == {}

    def test_partial_payload(self):
        update = StatusUpdate.model_validate({"statusLabel": "Review"})
        assert update.model_dump(exclude_unset=True) == {"status_label": "Review"}

    def test_negative_position_rejected(self):
        with pytest.raises(ValidationError):
            StatusUpdate(position=-1)

    def test_null_label_rejected(self):
        with pytest.raises(ValidationError, match="status_label cannot be null"):
            StatusUpdate(status_label=None)


class TestStatusIntegerInputs:
    def test_boolean_board_id_rejected(self):
        with pytest.raises(ValidationError, match="not a boolean") as exc_info:
            StatusCreate.model_validate({"boardId": True, "statusKey": "qa", "statusLabel": "QA"})
        assert exc_info.value.errors()[0]["loc"] == ("board_id",)

    def test_board_id_out_of_range(self):
        with pytest.raises(ValidationError):
            StatusCreate(board_id=10 ** 21, status_key="qa", status_label="QA")

    def test_boolean_position_rejected(self):
        with pytest.raises(ValidationError, match="not a boolean"):
            StatusUpdate(position=False)

    def test_position_upper_bound(self):
        assert StatusUpdate(position=2 ** 31 - 1).position == 2 ** 31 - 1
        with pytest.raises(ValidationError):
            StatusUpdate(position=2 ** 31)

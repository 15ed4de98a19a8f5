"""Unit tests for the board service layer."""

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from taskboard_svc.models import Board, BoardStatus, Task
from taskboard_svc.schemas.board import BoardCreate, BoardUpdate
from taskboard_svc.schemas.task import TaskCreate
from taskboard_svc.services import board_service
from taskboard_svc.services.board_service import (
    create_board,
    delete_board,
    get_board,
    list_boards,
    update_board,
)
from taskboard_svc.services.errors import BoardNotFoundError, BoardTitleConflictError
from taskboard_svc.services.task_service import create_task


class TestCreateBoard:
    """Test cases for create_board."""

    def test_creates_three_default_statuses_in_order(self, db_session: Session):
        result = create_board(BoardCreate(title="Sprint 1"), db_session)

        assert result["title"] == "Sprint 1"
        assert result["task_count"] == 0
        assert [s["status_key"] for s in result["statuses"]] == ["todo", "in_progress", "done"]
        assert [s["status_label"] for s in result["statuses"]] == ["To Do", "In Progress", "Done"]
        assert [s["position"] for s in result["statuses"]] == [0, 1, 2]
        assert all(s["board_id"] == result["id"] for s in result["statuses"])

    def test_board_persisted(self, db_session: Session):
        result = create_board(BoardCreate(title="Persisted", description="desc"), db_session)

        board = db_session.get(Board, result["id"])
        assert board.title == "Persisted"
        assert board.description == "desc"
        assert db_session.query(BoardStatus).filter_by(board_id=board.id).count() == 3

    def test_duplicate_title_conflicts(self, db_session: Session):
        create_board(BoardCreate(title="Sprint 1"), db_session)

        with pytest.raises(BoardTitleConflictError, match="Sprint 1"):
            create_board(BoardCreate(title="Sprint 1"), db_session)

        assert db_session.query(Board).count() == 1
        assert db_session.query(BoardStatus).count() == 3

    def test_duplicate_detected_after_trimming(self, db_session: Session):
        create_board(BoardCreate(title="Sprint 1"), db_session)

        with pytest.raises(BoardTitleConflictError):
            create_board(BoardCreate(title="   Sprint 1 "), db_session)

    def test_title_match_is_case_sensitive(self, db_session: Session):
        create_board(BoardCreate(title="Sprint 1"), db_session)
        create_board(BoardCreate(title="sprint 1"), db_session)

        assert db_session.query(Board).count() == 2


class TestGetAndListBoards:
    """Test cases for get_board and list_boards."""

    def test_get_board_includes_statuses_and_task_count(self, db_session: Session, board):
        create_task(TaskCreate(title="One", board_id=board["id"]), db_session)
        create_task(TaskCreate(title="Two", board_id=board["id"]), db_session)

        result = get_board(board["id"], db_session)

        assert result["task_count"] == 2
        assert [s["position"] for s in result["statuses"]] == [0, 1, 2]

    def test_get_missing_board(self, db_session: Session):
        with pytest.raises(BoardNotFoundError, match="Board with ID 999 not found"):
            get_board(999, db_session)

    def test_list_newest_first_with_counts(self, db_session: Session):
        first = create_board(BoardCreate(title="First"), db_session)
        second = create_board(BoardCreate(title="Second"), db_session)
        create_task(TaskCreate(title="t", board_id=first["id"]), db_session)

        boards = list_boards(db_session)

        assert [b["id"] for b in boards] == [second["id"], first["id"]]
        assert {b["id"]: b["task_count"] for b in boards} == {first["id"]: 1, second["id"]: 0}

    def test_list_empty(self, db_session: Session):
        assert list_boards(db_session) == []


class TestUpdateBoard:
    """Test cases for update_board."""

    def test_rename(self, db_session: Session, board):
        result = update_board(board["id"], BoardUpdate(title="Sprint 2", description="next"), db_session)

        assert result["title"] == "Sprint 2"
        assert result["description"] == "next"
        assert len(result["statuses"]) == 3

    def test_keeping_own_title_is_not_a_conflict(self, db_session: Session, board):
        result = update_board(board["id"], BoardUpdate(title="Sprint 1"), db_session)
        assert result["title"] == "Sprint 1"

    def test_description_untouched_when_omitted(self, db_session: Session):
        created = create_board(BoardCreate(title="B", description="keep me"), db_session)

        result = update_board(created["id"], BoardUpdate(title="B2"), db_session)

        assert result["description"] == "keep me"

    def test_title_taken_by_other_board(self, db_session: Session, board):
        other = create_board(BoardCreate(title="Other"), db_session)

        with pytest.raises(BoardTitleConflictError):
            update_board(other["id"], BoardUpdate(title="Sprint 1"), db_session)

        assert db_session.get(Board, other["id"]).title == "Other"

    def test_missing_board(self, db_session: Session):
        with pytest.raises(BoardNotFoundError):
            update_board(404, BoardUpdate(title="x"), db_session)


class TestDeleteBoard:
    """Test cases for delete_board."""

    def test_delete_cascades(self, db_session: Session, board):
        create_task(TaskCreate(title="t", board_id=board["id"]), db_session)

        result = delete_board(board["id"], db_session)

        assert result == {"message": "Board deleted successfully", "id": board["id"]}
        assert db_session.get(Board, board["id"]) is None
        assert db_session.execute(select(BoardStatus)).scalars().all() == []
        assert db_session.execute(select(Task)).scalars().all() == []

    def test_delete_leaves_other_boards_alone(self, db_session: Session, board):
        other = create_board(BoardCreate(title="Other"), db_session)
        create_task(TaskCreate(title="keep", board_id=other["id"]), db_session)

        delete_board(board["id"], db_session)

        assert db_session.query(BoardStatus).filter_by(board_id=other["id"]).count() == 3
        assert db_session.query(Task).filter_by(board_id=other["id"]).count() == 1

    def test_delete_missing_board(self, db_session: Session):
        with pytest.raises(BoardNotFoundError):
            delete_board(12345, db_session)


class TestTitleConstraintBackstop:
    """A title race that slips past the pre-check is still reported as a conflict."""

    @pytest.fixture(autouse=True)
    def skip_title_precheck(self, monkeypatch):
        monkeypatch.setattr(board_service, "_title_taken", lambda db, title, exclude_id=None: False)

    def test_create_duplicate_title(self, db_session: Session):
        create_board(BoardCreate(title="Sprint 1"), db_session)

        with pytest.raises(BoardTitleConflictError):
            create_board(BoardCreate(title="Sprint 1"), db_session)

        assert db_session.query(Board).count() == 1
        assert db_session.query(BoardStatus).count() == 3

    def test_rename_onto_existing_title(self, db_session: Session):
        create_board(BoardCreate(title="Sprint 1"), db_session)
        other = create_board(BoardCreate(title="Sprint 2"), db_session)

        with pytest.raises(BoardTitleConflictError):
            update_board(other["id"], BoardUpdate(title="Sprint 1"), db_session)

        assert db_session.get(Board, other["id"]).title == "Sprint 2"

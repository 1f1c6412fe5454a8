# tests/core/test_cascade_delete.py
import json

import pytest

from programhub.adapters.persistence.prototype_store import PROTOTYPE_STORAGE_KEY
from programhub.core.domain.database import PROGRAM_DEPENDENT_TABLES, TableName
from programhub.core.domain.exceptions import CascadeDeleteError, ProgramNotFoundError
from programhub.core.use_cases.delete_program import cascade_delete_program


@pytest.fixture
def program_y(store, host_partner):
    """Program Y with one coordinator, institution, teacher and pending invitation."""
    program = store.create_record(TableName.PROGRAMS, {"id": "program-y", "partner_id": host_partner.id, "name": "Y"})
    store.create_record(TableName.COORDINATORS, {"id": "coord-y", "program_id": program.id, "country": "DK"})
    store.create_record(TableName.INSTITUTIONS, {"id": "inst-y", "program_id": program.id, "country": "DK"})
    store.create_record(
        TableName.INSTITUTION_TEACHERS,
        {"id": "teacher-y", "program_id": program.id, "institution_id": "inst-y"},
    )
    store.create_record(
        TableName.INVITATIONS,
        {
            "id": "invite-y",
            "program_id": program.id,
            "invitation_type": "teacher",
            "recipient_email": "t@y.example",
            "status": "pending",
        },
    )
    return program


class TestCascadeDeleteProgram:

    def test_removes_program_and_dependents(self, store, program_y):
        """
        Scenario: Program Y with a coordinator, institution, teacher and invitation is deleted.
        Expected: No record references Y afterwards and Y itself is gone.
        """
        # Act
        report = cascade_delete_program(store.load_database(), program_y.id, store.delete_record)

        # Assert
        for table in PROGRAM_DEPENDENT_TABLES:
            assert [r for r in store.get_all(table) if r.program_id == program_y.id] == []
        assert store.get_by_id(TableName.PROGRAMS, program_y.id) is None

        assert report.program_deleted is True
        assert report.deleted == {
            "coordinators": ["coord-y"],
            "institutions": ["inst-y"],
            "institutionTeachers": ["teacher-y"],
            "invitations": ["invite-y"],
            "programs": ["program-y"],
        }
        assert report.deleted_count == 5

    def test_every_dependent_table_is_emptied(self, store, host_partner):
        """
        Scenario: Program Z has one record in each of the eight dependent collections.
        Expected: After the cascade none of them references Z and Z itself is gone.
        """
        # Arrange
        program = store.create_record(TableName.PROGRAMS, {"id": "program-z", "partner_id": host_partner.id, "name": "Z"})
        dependents = {
            TableName.PROGRAM_PARTNERS: {"partner_id": host_partner.id, "role": "host"},
            TableName.COORDINATORS: {"country": "DK"},
            TableName.INSTITUTIONS: {"country": "DK"},
            TableName.INSTITUTION_TEACHERS: {"institution_id": "inst-z"},
            TableName.PROGRAM_PROJECTS: {"status": "active"},
            TableName.PROGRAM_TEMPLATES: {"title": "Template Z"},
            TableName.INVITATIONS: {"invitation_type": "coordinator", "recipient_email": "c@z.example"},
            TableName.ACTIVITIES: {"type": "program_created"},
        }
        assert set(dependents) == set(PROGRAM_DEPENDENT_TABLES)
        for table, fields in dependents.items():
            store.create_record(table, {"program_id": program.id, **fields})

        # Act
        report = cascade_delete_program(store.load_database(), program.id, store.delete_record)

        # Assert
        for table in PROGRAM_DEPENDENT_TABLES:
            assert [r for r in store.get_all(table) if r.program_id == program.id] == []
            assert len(report.deleted[table.value]) == 1
        assert store.get_by_id(TableName.PROGRAMS, program.id) is None
        assert report.deleted_count == len(PROGRAM_DEPENDENT_TABLES) + 1

    def test_unreadable_dependents_are_removed_too(self, storage, store, program_y):
        """
        Scenario: A coordinator of Program Y was stored by a newer version and cannot be read.
        Expected: The cascade still removes it from storage.
        """
        # Arrange
        raw = json.loads(storage.get_item(PROTOTYPE_STORAGE_KEY))
        raw["coordinators"].append({"id": "coord-future", "programId": program_y.id, "status": "on_leave"})
        storage.set_item(PROTOTYPE_STORAGE_KEY, json.dumps(raw))

        # Act
        report = cascade_delete_program(store.load_database(), program_y.id, store.delete_record)

        # Assert
        stored = json.loads(storage.get_item(PROTOTYPE_STORAGE_KEY))
        assert stored["coordinators"] == []
        assert "coord-future" in report.deleted["coordinators"]

    def test_other_programs_are_untouched(self, store, host_partner, program_y, program_x):
        store.create_record(TableName.COORDINATORS, {"id": "coord-x", "program_id": program_x.id, "country": "SE"})

        cascade_delete_program(store.load_database(), program_y.id, store.delete_record)

        assert store.get_by_id(TableName.PROGRAMS, program_x.id) is not None
        assert [c.id for c in store.get_all(TableName.COORDINATORS)] == ["coord-x"]
        assert store.get_by_id(TableName.PARTNERS, host_partner.id) is not None

    def test_program_is_deleted_last(self, store, program_y):
        calls = []

        def recording_delete(table, record_id):
            calls.append(table)
            return store.delete_record(table, record_id)

        cascade_delete_program(store.load_database(), program_y.id, recording_delete)

        assert calls[-1] == TableName.PROGRAMS
        assert calls.count(TableName.PROGRAMS) == 1

    def test_no_database_is_a_no_op(self):
        def explode(table, record_id):
            raise AssertionError("must not be called")

        report = cascade_delete_program(None, "anything", explode)

        assert report.deleted == {}
        assert report.program_deleted is False

    def test_already_removed_records_are_skipped(self, store, program_y):
        snapshot = store.load_database()
        store.delete_record(TableName.INSTITUTIONS, "inst-y")

        report = cascade_delete_program(snapshot, program_y.id, store.delete_record)

        assert report.skipped == {"institutions": ["inst-y"]}
        assert report.program_deleted is True

    def test_failure_stops_and_keeps_the_program(self, store, program_y):
        """
        Scenario: Deleting the teacher fails half-way through.
        Expected: CascadeDeleteError carries a report of what was removed; the program still exists.
        """
        # Arrange
        def flaky_delete(table, record_id):
            if table == TableName.INSTITUTION_TEACHERS:
                raise OSError("disk full")
            return store.delete_record(table, record_id)

        # Act
        with pytest.raises(CascadeDeleteError) as excinfo:
            cascade_delete_program(store.load_database(), program_y.id, flaky_delete)

        # Assert
        error = excinfo.value
        assert error.table == "institutionTeachers"
        assert error.record_id == "teacher-y"
        assert isinstance(error.__cause__, OSError)
        assert error.report.deleted == {"coordinators": ["coord-y"], "institutions": ["inst-y"]}
        assert error.report.program_deleted is False
        assert store.get_by_id(TableName.PROGRAMS, program_y.id) is not None
        assert store.get_by_id(TableName.INVITATIONS, "invite-y") is not None


class TestDeleteProgramUseCase:

    def test_execute(self, container, store, program_y):
        # Arrange
        use_case = container.delete_program()

        # Act
        report = use_case.execute(program_y.id)

        # Assert
        assert report.program_deleted is True
        assert store.get_by_id(TableName.PROGRAMS, program_y.id) is None

    def test_unknown_program(self, container):
        with pytest.raises(ProgramNotFoundError):
            container.delete_program().execute("program-missing")

    def test_resources_are_not_touched(self, container, seeded_store):
        before = len(seeded_store.get_all(TableName.RESOURCES))

        container.delete_program().execute("program-climate-voices")

        assert len(seeded_store.get_all(TableName.RESOURCES)) == before

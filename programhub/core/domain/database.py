# programhub/core/domain/database.py
"""
The prototype document: one JSON object holding every collection.

Each collection is an ordered list of records keyed in the stored JSON by
its camelCase table name (``programPartners``), next to a small
``metadata`` block. ``TableName`` is the only accepted way to address a
collection from outside; ``TABLES`` maps it to the Python attribute and the
record model used to validate it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Type, Union

from pydantic import Field, PrivateAttr

from .exceptions import UnknownTableError
from .models import (
    CamelModel,
    CountryCoordinator,
    EducationalInstitution,
    InstitutionTeacher,
    MutableRecord,
    Partner,
    PartnerUser,
    Program,
    ProgramActivity,
    ProgramInvitation,
    ProgramPartner,
    ProgramProject,
    ProgramProjectTemplate,
    ProgramResource,
    Record,
)


DEFAULT_SCHEMA_VERSION = 1


class TableName(str, Enum):
    PARTNERS = "partners"
    PARTNER_USERS = "partnerUsers"
    PROGRAMS = "programs"
    PROGRAM_PARTNERS = "programPartners"
    COORDINATORS = "coordinators"
    INSTITUTIONS = "institutions"
    INSTITUTION_TEACHERS = "institutionTeachers"
    PROGRAM_PROJECTS = "programProjects"
    PROGRAM_TEMPLATES = "programTemplates"
    INVITATIONS = "invitations"
    ACTIVITIES = "activities"
    RESOURCES = "resources"


class TableSpec(NamedTuple):
    attribute: str
    model: Type[Record]

    @property
    def is_mutable(self) -> bool:
        return issubclass(self.model, MutableRecord)


TABLES: Dict[TableName, TableSpec] = {
    TableName.PARTNERS: TableSpec("partners", Partner),
    TableName.PARTNER_USERS: TableSpec("partner_users", PartnerUser),
    TableName.PROGRAMS: TableSpec("programs", Program),
    TableName.PROGRAM_PARTNERS: TableSpec("program_partners", ProgramPartner),
    TableName.COORDINATORS: TableSpec("coordinators", CountryCoordinator),
    TableName.INSTITUTIONS: TableSpec("institutions", EducationalInstitution),
    TableName.INSTITUTION_TEACHERS: TableSpec("institution_teachers", InstitutionTeacher),
    TableName.PROGRAM_PROJECTS: TableSpec("program_projects", ProgramProject),
    TableName.PROGRAM_TEMPLATES: TableSpec("program_templates", ProgramProjectTemplate),
    TableName.INVITATIONS: TableSpec("invitations", ProgramInvitation),
    TableName.ACTIVITIES: TableSpec("activities", ProgramActivity),
    TableName.RESOURCES: TableSpec("resources", ProgramResource),
}

# Collections whose records hang off a program through ``program_id``,
# in the order cascade deletion removes them.
PROGRAM_DEPENDENT_TABLES = (
    TableName.PROGRAM_PARTNERS,
    TableName.COORDINATORS,
    TableName.INSTITUTIONS,
    TableName.INSTITUTION_TEACHERS,
    TableName.PROGRAM_PROJECTS,
    TableName.PROGRAM_TEMPLATES,
    TableName.INVITATIONS,
    TableName.ACTIVITIES,
)


def resolve_table(table: Union[TableName, str]) -> TableName:
    """Accept a TableName or its string value; anything else is a caller bug."""
    try:
        return TableName(table)
    except ValueError:
        raise UnknownTableError(str(table)) from None


class PrototypeMetadata(CamelModel):
    version: int = DEFAULT_SCHEMA_VERSION
    seeded_at: Optional[str] = None


class PrototypeDatabase(CamelModel):
    partners: List[Partner] = Field(default_factory=list)
    partner_users: List[PartnerUser] = Field(default_factory=list)
    programs: List[Program] = Field(default_factory=list)
    program_partners: List[ProgramPartner] = Field(default_factory=list)
    coordinators: List[CountryCoordinator] = Field(default_factory=list)
    institutions: List[EducationalInstitution] = Field(default_factory=list)
    institution_teachers: List[InstitutionTeacher] = Field(default_factory=list)
    program_projects: List[ProgramProject] = Field(default_factory=list)
    program_templates: List[ProgramProjectTemplate] = Field(default_factory=list)
    invitations: List[ProgramInvitation] = Field(default_factory=list)
    activities: List[ProgramActivity] = Field(default_factory=list)
    resources: List[ProgramResource] = Field(default_factory=list)
    metadata: PrototypeMetadata = Field(default_factory=PrototypeMetadata)

    # Stored records the current models cannot read (newer enum values, missing
    # fields). Kept verbatim so they are written back, never joined.
    _unparsed: Dict[TableName, List[Dict[str, Any]]] = PrivateAttr(default_factory=dict)

    def table(self, table: Union[TableName, str]) -> List[Record]:
        """The live list backing a collection (mutations are visible)."""
        return getattr(self, TABLES[resolve_table(table)].attribute)

    def unparsed(self, table: Union[TableName, str]) -> List[Dict[str, Any]]:
        """Raw stored records of a collection that failed validation (live list)."""
        return self._unparsed.setdefault(resolve_table(table), [])

    def record_ids(self, table: Union[TableName, str]) -> List[str]:
        """Ids of every stored record in a collection, readable or not."""
        return [record.id for record in self.table(table)] + [
            raw.get("id") for raw in self.unparsed(table) if raw.get("id")
        ]

    def counts(self) -> Dict[str, int]:
        return {name.value: len(self.table(name)) for name in TableName}


def empty_database(version: int = DEFAULT_SCHEMA_VERSION) -> PrototypeDatabase:
    return PrototypeDatabase(metadata=PrototypeMetadata(version=version))

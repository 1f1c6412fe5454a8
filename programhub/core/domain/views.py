# programhub/core/domain/views.py
"""
Read models handed to callers.

These are computed on every request from the current collections and are
never written back to the store. Field names follow the persisted records
(camelCase on dump, snake_case in Python).
"""

from typing import Dict, List, Optional

from pydantic import Field

from .models import (
    CamelModel,
    CountryCoordinator,
    EducationalInstitution,
    InstitutionTeacher,
    Partner,
    PartnerUser,
    Program,
    ProgramActivity,
    ProgramInvitation,
    ProgramPartner,
    ProgramProject,
    ProgramProjectTemplate,
)


class CoPartnerLink(CamelModel):
    """A co-partner relationship together with the partner it points at, if that still exists."""
    relationship: ProgramPartner
    partner: Optional[Partner] = None


class ProgramSummaryMetrics(CamelModel):
    student_count: int = 0
    institution_count: int = 0
    active_institution_count: int = 0
    teacher_count: int = 0
    coordinator_count: int = 0
    co_partner_count: int = 0
    project_count: int = 0
    active_project_count: int = 0
    template_count: int = 0
    pending_invitations: int = 0
    countries: List[str] = Field(default_factory=list)


class ProgramSummary(CamelModel):
    program: Program
    co_partners: List[CoPartnerLink] = Field(default_factory=list)
    coordinators: List[CountryCoordinator] = Field(default_factory=list)
    institutions: List[EducationalInstitution] = Field(default_factory=list)
    teachers: List[InstitutionTeacher] = Field(default_factory=list)
    projects: List[ProgramProject] = Field(default_factory=list)
    templates: List[ProgramProjectTemplate] = Field(default_factory=list)
    invitations: List[ProgramInvitation] = Field(default_factory=list)
    activities: List[ProgramActivity] = Field(default_factory=list)
    metrics: ProgramSummaryMetrics = Field(default_factory=ProgramSummaryMetrics)


class PartnerProgramMetrics(CamelModel):
    total_programs: int = 0
    active_programs: int = 0
    co_partners: int = 0
    coordinators: int = 0
    institutions: int = 0
    teachers: int = 0
    students: int = 0
    projects: int = 0
    active_projects: int = 0
    templates: int = 0
    pending_invitations: int = 0
    country_count: int = 0


class CatalogMetrics(CamelModel):
    templates: int = 0
    active_projects: int = 0
    institutions: int = 0
    countries: int = 0
    students: int = 0


class ProgramCatalogItem(CamelModel):
    id: str
    name: str
    display_title: str
    marketing_tagline: Optional[str] = None
    description: str = ""
    status: str
    is_public: bool
    host_partner: Optional[Partner] = None
    supporting_partner: Optional[Partner] = None
    supporting_partner_role: Optional[str] = None
    cover_image_url: Optional[str] = None
    brand_color: Optional[str] = None
    sdg_focus: List[int] = Field(default_factory=list)
    start_month_label: Optional[str] = None
    metrics: CatalogMetrics = Field(default_factory=CatalogMetrics)
    templates: List[ProgramProjectTemplate] = Field(default_factory=list)


class PartnerContext(CamelModel):
    partner_id: Optional[str] = None
    partner: Optional[Partner] = None
    partner_user: Optional[PartnerUser] = None


class PartnerOverview(CamelModel):
    """Everything a partner dashboard needs in one go."""
    context: PartnerContext = Field(default_factory=PartnerContext)
    summaries: List[ProgramSummary] = Field(default_factory=list)
    metrics: PartnerProgramMetrics = Field(default_factory=PartnerProgramMetrics)


class CascadeDeleteReport(CamelModel):
    program_id: str
    deleted: Dict[str, List[str]] = Field(default_factory=dict)
    skipped: Dict[str, List[str]] = Field(default_factory=dict)
    program_deleted: bool = False

    @property
    def deleted_count(self) -> int:
        return sum(len(ids) for ids in self.deleted.values())

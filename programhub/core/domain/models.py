# programhub/core/domain/models.py
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every persisted shape.

    Attributes are snake_case in Python and camelCase in the stored JSON
    (``countries_in_scope`` <-> ``countriesInScope``). Either spelling is
    accepted on input. Unknown keys are kept so that documents written by a
    newer schema survive a round-trip through an older reader.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        extra="allow",
    )


# UN Sustainable Development Goals are numbered 1 to 17.
SdgGoal = Annotated[int, Field(ge=1, le=17)]


# --- Enums ---

class OrganizationType(str, Enum):
    NGO = "ngo"
    GOVERNMENT = "government"
    SCHOOL_NETWORK = "school_network"
    COMMERCIAL = "commercial"
    OTHER = "other"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class PartnerUserRole(str, Enum):
    ADMIN = "admin"
    COORDINATOR = "coordinator"
    COLLABORATOR = "collaborator"


class ProgramStatus(str, Enum):
    """Lifecycle of a program (and of the projects running under it)."""
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class CoPartnerRole(str, Enum):
    HOST = "host"           # Primary program owner
    CO_HOST = "co_host"     # Co-managing partner with full permissions
    SPONSOR = "sponsor"
    ADVISOR = "advisor"
    SUPPORTER = "supporter"


class RelationshipStatus(str, Enum):
    INVITED = "invited"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    REMOVED = "removed"


class MemberStatus(str, Enum):
    """Shared by coordinators and teachers."""
    INVITED = "invited"
    ACTIVE = "active"
    INACTIVE = "inactive"


class InstitutionStatus(str, Enum):
    INVITED = "invited"
    ACTIVE = "active"
    INACTIVE = "inactive"
    WITHDRAWN = "withdrawn"


class CreatorType(str, Enum):
    PARTNER = "partner"
    COORDINATOR = "coordinator"
    TEACHER = "teacher"


class InvitationType(str, Enum):
    CO_PARTNER = "co_partner"
    COORDINATOR = "coordinator"
    INSTITUTION = "institution"
    TEACHER = "teacher"


class InvitationStatus(str, Enum):
    PENDING = "pending"
    VIEWED = "viewed"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class ResourceOwnerRole(str, Enum):
    PARTNER = "partner"
    PARENT = "parent"


class ResourceAvailabilityScope(str, Enum):
    ORGANIZATION = "organization"
    ALL_PARTNERS = "all_partners"
    SPECIFIC_PARTNERS = "specific_partners"


# --- Base records ---

class Record(CamelModel):
    """Anything stored in a collection: a stable id and a creation stamp."""
    id: str
    created_at: Optional[str] = None


class MutableRecord(Record):
    """Records that are edited after creation and carry an update stamp."""
    updated_at: Optional[str] = None


# --- Partners ---

class Partner(MutableRecord):
    organization_name: str
    organization_type: OrganizationType = OrganizationType.OTHER
    logo: Optional[str] = None
    description: str = ""
    mission: str = ""
    website: Optional[str] = None
    contact_email: str = ""
    contact_phone: Optional[str] = None
    country: str = ""
    languages: List[str] = Field(default_factory=list)
    sdg_focus: List[str] = Field(default_factory=list)
    is_active: bool = True
    verification_status: VerificationStatus = VerificationStatus.PENDING


class PartnerUser(Record):
    partner_id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: PartnerUserRole = PartnerUserRole.COLLABORATOR
    has_accepted_terms: bool = False
    two_factor_enabled: bool = False
    is_active: bool = True
    last_login_at: Optional[str] = None


# --- Programs ---

class Program(MutableRecord):
    """
    The aggregation root. Nearly every other record points at a program
    through its ``program_id``.
    """
    partner_id: str
    name: str
    display_title: str = ""
    marketing_tagline: Optional[str] = None
    description: str = ""
    supporting_partner_id: Optional[str] = None
    supporting_partner_role: Optional[str] = None

    # Scope
    project_types: List[str] = Field(default_factory=list)
    pedagogical_framework: List[str] = Field(default_factory=list)
    learning_goals: str = ""
    target_age_ranges: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    countries_in_scope: List[str] = Field(default_factory=list)
    sdg_focus: List[SdgGoal] = Field(default_factory=list)
    crc_focus: List[str] = Field(default_factory=list)

    # Timeline
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    # Branding
    program_url: Optional[str] = None
    brand_color: Optional[str] = None
    logo: Optional[str] = None
    hero_image_url: Optional[str] = None

    status: ProgramStatus = ProgramStatus.DRAFT
    is_public: bool = False
    created_by: Optional[str] = None


class CoPartnerPermissions(CamelModel):
    can_edit_program: bool = False
    can_invite_coordinators: bool = False
    can_view_all_data: bool = False
    can_manage_projects: bool = False
    can_remove_participants: bool = False


class ProgramPartner(MutableRecord):
    """Co-partner relationship between a program and a second partner."""
    program_id: str
    partner_id: str
    role: CoPartnerRole = CoPartnerRole.SUPPORTER
    permissions: CoPartnerPermissions = Field(default_factory=CoPartnerPermissions)
    invited_by: Optional[str] = None
    invited_at: Optional[str] = None
    status: RelationshipStatus = RelationshipStatus.INVITED
    accepted_at: Optional[str] = None


class CountryCoordinator(MutableRecord):
    program_id: str
    country: str
    user_id: Optional[str] = None
    region: Optional[str] = None
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: Optional[str] = None
    status: MemberStatus = MemberStatus.INVITED
    invited_by: Optional[str] = None
    invited_at: Optional[str] = None
    accepted_at: Optional[str] = None


class EducationalInstitution(MutableRecord):
    program_id: str
    coordinator_id: Optional[str] = None
    name: str = ""
    type: str = "other"
    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    contact_email: str = ""
    contact_phone: Optional[str] = None
    principal_name: Optional[str] = None
    principal_email: Optional[str] = None
    student_count: Optional[int] = 0
    active_student_count: Optional[int] = None
    student_age_range: Optional[str] = None
    teacher_count: Optional[int] = None
    education_levels: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    status: InstitutionStatus = InstitutionStatus.INVITED
    invited_at: Optional[str] = None
    joined_at: Optional[str] = None


class InstitutionTeacher(MutableRecord):
    program_id: str
    institution_id: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    subject: Optional[str] = None
    grade_level: Optional[str] = None
    years_experience: Optional[int] = None
    status: MemberStatus = MemberStatus.INVITED
    invited_at: Optional[str] = None
    accepted_at: Optional[str] = None


class ProgramProject(MutableRecord):
    program_id: str
    project_id: Optional[str] = None
    title: Optional[str] = None
    created_by_type: CreatorType = CreatorType.PARTNER
    created_by_id: Optional[str] = None
    participant_ids: List[str] = Field(default_factory=list)
    associated_co_partner_id: Optional[str] = None
    status: ProgramStatus = ProgramStatus.DRAFT
    cover_image_url: Optional[str] = None
    template_id: Optional[str] = None


class ProgramProjectTemplate(MutableRecord):
    program_id: str
    title: str
    summary: str = ""
    hero_image_url: Optional[str] = None
    estimated_duration_weeks: Optional[int] = None
    recommended_start_month: Optional[str] = None
    subject_focus: List[str] = Field(default_factory=list)
    sdg_alignment: List[SdgGoal] = Field(default_factory=list)
    required_materials: List[str] = Field(default_factory=list)
    language_support: List[str] = Field(default_factory=list)
    project_type: Optional[str] = None
    is_active: bool = True


class ProgramInvitation(MutableRecord):
    program_id: str
    invitation_type: InvitationType
    recipient_email: str
    recipient_name: Optional[str] = None
    sent_by: Optional[str] = None
    sent_by_type: CreatorType = CreatorType.PARTNER
    custom_message: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    token: str = ""
    expires_at: Optional[str] = None
    status: InvitationStatus = InvitationStatus.PENDING
    sent_at: Optional[str] = None
    viewed_at: Optional[str] = None
    responded_at: Optional[str] = None

    # Co-partner invitations
    proposed_role: Optional[CoPartnerRole] = None
    proposed_permissions: Optional[CoPartnerPermissions] = None

    # Coordinator invitations
    assigned_country: Optional[str] = None
    assigned_region: Optional[str] = None


class ProgramActivity(Record):
    """Audit trail entry. Never updated once written."""
    program_id: str
    type: str
    actor_name: str = ""
    actor_type: str = "partner"
    description: str = ""
    timestamp: Optional[str] = None


# --- Resources ---

class ProgramResource(MutableRecord):
    title: str
    description: str = ""
    type: str = "document"
    language: str = "en"
    target_audience: List[str] = Field(default_factory=list)
    sdg_alignment: List[SdgGoal] = Field(default_factory=list)
    crc_alignment: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False
    source_type: str = "url"
    source_url: Optional[str] = None
    hero_image_url: Optional[str] = None
    owner_role: ResourceOwnerRole = ResourceOwnerRole.PARTNER
    owner_organization: str = ""
    owner_partner_id: Optional[str] = None
    created_by: Optional[str] = None
    program_assignment: str = "all"
    specific_program_ids: List[str] = Field(default_factory=list)
    availability_scope: ResourceAvailabilityScope = ResourceAvailabilityScope.ORGANIZATION
    target_partner_ids: List[str] = Field(default_factory=list)


# --- Session ---

class UserSession(BaseModel):
    """The signed-in user as handed over by the session provider."""
    email: str
    role: str
    organization: Optional[str] = None
    name: Optional[str] = None
    login_time: Optional[str] = None

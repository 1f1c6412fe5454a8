# programhub/core/domain/seeds.py
"""
Demo data for the prototype store.

Three partners running two public programs and one private draft, with
enough coordinators, schools, teachers and templates for every dashboard
and catalog view to have something to show. Ids are fixed so seeded
records can be referenced from docs and tests.
"""

from typing import Any, Dict, List

from .database import TableName

SeedData = Dict[TableName, List[Dict[str, Any]]]


DEMO_SEED: SeedData = {
    TableName.PARTNERS: [
        {
            "id": "partner-save-the-children",
            "organization_name": "Save the Children Denmark",
            "organization_type": "ngo",
            "logo": "https://cdn.class2class.example/partners/stc-logo.png",
            "description": "Child rights organisation working with schools across Europe.",
            "mission": "Every child survives, learns and is protected.",
            "website": "https://savethechildren.example/dk",
            "contact_email": "partnerships@stc.example",
            "country": "DK",
            "languages": ["da", "en"],
            "sdg_focus": ["4", "16"],
            "verification_status": "verified",
            "created_at": "2024-01-05T09:00:00.000Z",
        },
        {
            "id": "partner-lego-foundation",
            "organization_name": "LEGO Foundation",
            "organization_type": "commercial",
            "logo": "https://cdn.class2class.example/partners/lego-logo.png",
            "description": "Learning through play for children everywhere.",
            "contact_email": "programs@lego-foundation.example",
            "country": "DK",
            "languages": ["en"],
            "sdg_focus": ["4"],
            "verification_status": "verified",
            "created_at": "2024-01-08T09:00:00.000Z",
        },
        {
            "id": "partner-unicef",
            "organization_name": "UNICEF Italia",
            "organization_type": "ngo",
            "description": "National committee supporting UNICEF programmes.",
            "contact_email": "scuole@unicef.example",
            "country": "IT",
            "languages": ["it", "en"],
            "sdg_focus": ["3", "4", "10"],
            "verification_status": "pending",
            "created_at": "2024-02-01T09:00:00.000Z",
        },
    ],
    TableName.PARTNER_USERS: [
        {
            "id": "partner-user-stc-admin",
            "partner_id": "partner-save-the-children",
            "email": "mette.hansen@stc.example",
            "first_name": "Mette",
            "last_name": "Hansen",
            "role": "admin",
            "has_accepted_terms": True,
            "created_at": "2024-01-05T09:10:00.000Z",
        },
        {
            "id": "partner-user-lego-admin",
            "partner_id": "partner-lego-foundation",
            "email": "jonas.berg@lego-foundation.example",
            "first_name": "Jonas",
            "last_name": "Berg",
            "role": "admin",
            "has_accepted_terms": True,
            "created_at": "2024-01-08T09:10:00.000Z",
        },
        {
            "id": "partner-user-unicef-coordinator",
            "partner_id": "partner-unicef",
            "email": "giulia.romano@unicef.example",
            "first_name": "Giulia",
            "last_name": "Romano",
            "role": "coordinator",
            "created_at": "2024-02-01T09:10:00.000Z",
        },
    ],
    TableName.PROGRAMS: [
        {
            "id": "program-climate-voices",
            "partner_id": "partner-save-the-children",
            "name": "Climate Voices",
            "display_title": "Climate Voices: Classrooms for Climate Action",
            "marketing_tagline": "Students across borders investigating their local climate.",
            "description": "Paired classrooms document climate change in their communities.",
            "supporting_partner_id": "partner-lego-foundation",
            "supporting_partner_role": "Learning through play advisor",
            "project_types": ["exchange", "research"],
            "target_age_ranges": ["10-12", "13-15"],
            "languages": ["en", "da", "it"],
            "countries_in_scope": ["DK"],
            "sdg_focus": [4, 13],
            "start_date": "2024-09-01",
            "end_date": "2025-06-30",
            "brand_color": "#0f766e",
            "status": "active",
            "is_public": True,
            "created_by": "partner-user-stc-admin",
            "created_at": "2024-03-01T10:00:00.000Z",
        },
        {
            "id": "program-playful-futures",
            "partner_id": "partner-lego-foundation",
            "name": "Playful Futures",
            "description": "Design challenges that bring play-based learning into primary classrooms.",
            "countries_in_scope": ["DK", "IT"],
            "sdg_focus": [4],
            "start_date": "2025-02-03",
            "logo": "https://cdn.class2class.example/programs/playful-futures.png",
            "status": "active",
            "is_public": True,
            "created_by": "partner-user-lego-admin",
            "created_at": "2024-04-15T10:00:00.000Z",
        },
        {
            "id": "program-rights-lab",
            "partner_id": "partner-save-the-children",
            "name": "Children's Rights Lab",
            "description": "Pilot for teaching the Convention on the Rights of the Child.",
            "countries_in_scope": [],
            "crc_focus": ["12", "13"],
            "status": "draft",
            "is_public": False,
            "created_at": "2024-05-20T10:00:00.000Z",
        },
    ],
    TableName.PROGRAM_PARTNERS: [
        {
            "id": "program-partner-climate-host",
            "program_id": "program-climate-voices",
            "partner_id": "partner-save-the-children",
            "role": "host",
            "permissions": {
                "can_edit_program": True,
                "can_invite_coordinators": True,
                "can_view_all_data": True,
                "can_manage_projects": True,
                "can_remove_participants": True,
            },
            "status": "accepted",
            "accepted_at": "2024-03-01T10:00:00.000Z",
            "created_at": "2024-03-01T10:00:00.000Z",
        },
        {
            "id": "program-partner-climate-lego",
            "program_id": "program-climate-voices",
            "partner_id": "partner-lego-foundation",
            "role": "advisor",
            "permissions": {"can_view_all_data": True},
            "invited_by": "partner-user-stc-admin",
            "invited_at": "2024-03-02T08:00:00.000Z",
            "status": "accepted",
            "accepted_at": "2024-03-04T12:00:00.000Z",
            "created_at": "2024-03-02T08:00:00.000Z",
        },
        {
            "id": "program-partner-climate-unicef",
            "program_id": "program-climate-voices",
            "partner_id": "partner-unicef",
            "role": "supporter",
            "invited_by": "partner-user-stc-admin",
            "invited_at": "2024-06-10T08:00:00.000Z",
            "status": "invited",
            "created_at": "2024-06-10T08:00:00.000Z",
        },
        {
            "id": "program-partner-playful-unicef",
            "program_id": "program-playful-futures",
            "partner_id": "partner-unicef",
            "role": "co_host",
            "permissions": {
                "can_edit_program": True,
                "can_invite_coordinators": True,
                "can_view_all_data": True,
                "can_manage_projects": True,
            },
            "status": "accepted",
            "accepted_at": "2024-04-20T09:00:00.000Z",
            "created_at": "2024-04-16T09:00:00.000Z",
        },
    ],
    TableName.COORDINATORS: [
        {
            "id": "coordinator-climate-dk",
            "program_id": "program-climate-voices",
            "country": "DK",
            "email": "anders.nielsen@stc.example",
            "first_name": "Anders",
            "last_name": "Nielsen",
            "status": "active",
            "created_at": "2024-03-05T09:00:00.000Z",
        },
        {
            "id": "coordinator-climate-it",
            "program_id": "program-climate-voices",
            "country": "IT",
            "region": "Lazio",
            "email": "chiara.bianchi@unicef.example",
            "first_name": "Chiara",
            "last_name": "Bianchi",
            "status": "invited",
            "created_at": "2024-06-12T09:00:00.000Z",
        },
        {
            "id": "coordinator-playful-it",
            "program_id": "program-playful-futures",
            "country": "IT",
            "email": "marco.ricci@unicef.example",
            "first_name": "Marco",
            "last_name": "Ricci",
            "status": "active",
            "created_at": "2024-04-22T09:00:00.000Z",
        },
    ],
    TableName.INSTITUTIONS: [
        {
            "id": "institution-aarhus-skole",
            "program_id": "program-climate-voices",
            "coordinator_id": "coordinator-climate-dk",
            "name": "Aarhus Friskole",
            "type": "primary_school",
            "country": "DK",
            "city": "Aarhus",
            "contact_email": "kontor@aarhusfriskole.example",
            "student_count": 240,
            "education_levels": ["primary"],
            "languages": ["da", "en"],
            "status": "active",
            "joined_at": "2024-03-20T09:00:00.000Z",
            "created_at": "2024-03-10T09:00:00.000Z",
        },
        {
            "id": "institution-roma-scuola",
            "program_id": "program-climate-voices",
            "coordinator_id": "coordinator-climate-it",
            "name": "Istituto Comprensivo Roma Centro",
            "type": "secondary_school",
            "country": "IT",
            "city": "Roma",
            "contact_email": "segreteria@icromacentro.example",
            "student_count": 410,
            "education_levels": ["lower_secondary"],
            "languages": ["it"],
            "status": "invited",
            "created_at": "2024-06-15T09:00:00.000Z",
        },
        {
            "id": "institution-milano-primaria",
            "program_id": "program-playful-futures",
            "coordinator_id": "coordinator-playful-it",
            "name": "Scuola Primaria Milano Nord",
            "type": "primary_school",
            "country": "IT",
            "city": "Milano",
            "student_count": 180,
            "status": "active",
            "created_at": "2024-05-02T09:00:00.000Z",
        },
    ],
    TableName.INSTITUTION_TEACHERS: [
        {
            "id": "teacher-aarhus-lise",
            "program_id": "program-climate-voices",
            "institution_id": "institution-aarhus-skole",
            "email": "lise.madsen@aarhusfriskole.example",
            "first_name": "Lise",
            "last_name": "Madsen",
            "subject": "Science",
            "grade_level": "6",
            "status": "active",
            "created_at": "2024-03-22T09:00:00.000Z",
        },
        {
            "id": "teacher-roma-paolo",
            "program_id": "program-climate-voices",
            "institution_id": "institution-roma-scuola",
            "email": "paolo.conti@icromacentro.example",
            "first_name": "Paolo",
            "last_name": "Conti",
            "subject": "Geography",
            "status": "invited",
            "created_at": "2024-06-18T09:00:00.000Z",
        },
        {
            "id": "teacher-milano-sara",
            "program_id": "program-playful-futures",
            "institution_id": "institution-milano-primaria",
            "email": "sara.galli@milanonord.example",
            "first_name": "Sara",
            "last_name": "Galli",
            "status": "active",
            "created_at": "2024-05-05T09:00:00.000Z",
        },
    ],
    TableName.PROGRAM_TEMPLATES: [
        {
            "id": "template-climate-journal",
            "program_id": "program-climate-voices",
            "title": "Local Climate Journal",
            "summary": "Students keep a shared journal of weather and local changes.",
            "hero_image_url": "https://cdn.class2class.example/templates/climate-journal.jpg",
            "estimated_duration_weeks": 8,
            "recommended_start_month": "September",
            "subject_focus": ["science", "language"],
            "sdg_alignment": [13],
            "language_support": ["en", "da", "it"],
            "project_type": "exchange",
            "created_at": "2024-03-06T09:00:00.000Z",
        },
        {
            "id": "template-climate-interview",
            "program_id": "program-climate-voices",
            "title": "Interview a Climate Witness",
            "summary": "Classes interview elders about how their surroundings changed.",
            "estimated_duration_weeks": 4,
            "sdg_alignment": [4, 13],
            "created_at": "2024-03-07T09:00:00.000Z",
        },
        {
            "id": "template-playful-bridge",
            "program_id": "program-playful-futures",
            "title": "Build a Bridge Challenge",
            "summary": "Paired classes design and test bridges with everyday materials.",
            "estimated_duration_weeks": 3,
            "required_materials": ["cardboard", "string", "tape"],
            "created_at": "2024-04-18T09:00:00.000Z",
        },
    ],
    TableName.PROGRAM_PROJECTS: [
        {
            "id": "program-project-aarhus-roma",
            "program_id": "program-climate-voices",
            "project_id": "project-aarhus-roma-journal",
            "title": "Aarhus x Roma climate journal",
            "created_by_type": "teacher",
            "created_by_id": "teacher-aarhus-lise",
            "participant_ids": ["teacher-aarhus-lise", "teacher-roma-paolo"],
            "status": "active",
            "template_id": "template-climate-journal",
            "created_at": "2024-09-10T09:00:00.000Z",
        },
        {
            "id": "program-project-aarhus-draft",
            "program_id": "program-climate-voices",
            "title": "Climate witnesses (draft)",
            "created_by_type": "coordinator",
            "created_by_id": "coordinator-climate-dk",
            "status": "draft",
            "template_id": "template-climate-interview",
            "created_at": "2024-10-01T09:00:00.000Z",
        },
        {
            "id": "program-project-milano-bridge",
            "program_id": "program-playful-futures",
            "title": "Milano bridge builders",
            "created_by_type": "teacher",
            "created_by_id": "teacher-milano-sara",
            "participant_ids": ["teacher-milano-sara"],
            "status": "active",
            "template_id": "template-playful-bridge",
            "created_at": "2025-02-10T09:00:00.000Z",
        },
    ],
    TableName.INVITATIONS: [
        {
            "id": "invitation-climate-unicef",
            "program_id": "program-climate-voices",
            "invitation_type": "co_partner",
            "recipient_email": "scuole@unicef.example",
            "recipient_name": "UNICEF Italia",
            "sent_by": "partner-user-stc-admin",
            "token": "demo-token-co-partner",
            "status": "pending",
            "sent_at": "2024-06-10T08:00:00.000Z",
            "expires_at": "2024-07-10T08:00:00.000Z",
            "proposed_role": "supporter",
            "created_at": "2024-06-10T08:00:00.000Z",
        },
        {
            "id": "invitation-climate-it-coordinator",
            "program_id": "program-climate-voices",
            "invitation_type": "coordinator",
            "recipient_email": "chiara.bianchi@unicef.example",
            "sent_by": "partner-user-stc-admin",
            "token": "demo-token-coordinator",
            "status": "viewed",
            "sent_at": "2024-06-12T09:00:00.000Z",
            "viewed_at": "2024-06-13T10:30:00.000Z",
            "assigned_country": "IT",
            "assigned_region": "Lazio",
            "created_at": "2024-06-12T09:00:00.000Z",
        },
        {
            "id": "invitation-playful-teacher",
            "program_id": "program-playful-futures",
            "invitation_type": "teacher",
            "recipient_email": "luca.fontana@milanonord.example",
            "sent_by": "coordinator-playful-it",
            "sent_by_type": "coordinator",
            "token": "demo-token-teacher",
            "status": "pending",
            "sent_at": "2025-01-20T09:00:00.000Z",
            "metadata": {"institutionId": "institution-milano-primaria"},
            "created_at": "2025-01-20T09:00:00.000Z",
        },
    ],
    TableName.ACTIVITIES: [
        {
            "id": "activity-climate-created",
            "program_id": "program-climate-voices",
            "type": "program_created",
            "actor_name": "Mette Hansen",
            "description": "Created the Climate Voices program.",
            "timestamp": "2024-03-01T10:00:00.000Z",
            "created_at": "2024-03-01T10:00:00.000Z",
        },
        {
            "id": "activity-climate-school-joined",
            "program_id": "program-climate-voices",
            "type": "institution_joined",
            "actor_name": "Anders Nielsen",
            "actor_type": "coordinator",
            "description": "Aarhus Friskole joined the program.",
            "timestamp": "2024-03-20T09:00:00.000Z",
            "created_at": "2024-03-20T09:00:00.000Z",
        },
        {
            "id": "activity-playful-project-started",
            "program_id": "program-playful-futures",
            "type": "project_started",
            "actor_name": "Sara Galli",
            "actor_type": "teacher",
            "description": "Started Milano bridge builders.",
            "timestamp": "2025-02-10T09:00:00.000Z",
            "created_at": "2025-02-10T09:00:00.000Z",
        },
    ],
    TableName.RESOURCES: [
        {
            "id": "resource-crc-toolkit",
            "title": "Children's Rights Classroom Toolkit",
            "description": "Lesson plans introducing the Convention on the Rights of the Child.",
            "type": "document",
            "language": "en",
            "target_audience": ["teachers"],
            "crc_alignment": ["12", "13"],
            "source_url": "https://cdn.class2class.example/resources/crc-toolkit.pdf",
            "owner_role": "parent",
            "owner_organization": "Class2Class",
            "availability_scope": "all_partners",
            "created_at": "2024-02-10T09:00:00.000Z",
            "updated_at": "2024-08-01T09:00:00.000Z",
        },
        {
            "id": "resource-climate-briefing",
            "title": "Climate Voices Coordinator Briefing",
            "type": "presentation",
            "source_url": "https://cdn.class2class.example/resources/climate-briefing.pdf",
            "owner_role": "partner",
            "owner_organization": "Save the Children Denmark",
            "owner_partner_id": "partner-save-the-children",
            "program_assignment": "specific",
            "specific_program_ids": ["program-climate-voices"],
            "created_at": "2024-03-08T09:00:00.000Z",
            "updated_at": "2024-03-08T09:00:00.000Z",
        },
        {
            "id": "resource-play-guide",
            "title": "Learning Through Play Facilitator Guide",
            "type": "document",
            "owner_role": "parent",
            "owner_organization": "Class2Class",
            "availability_scope": "specific_partners",
            "target_partner_ids": ["partner-lego-foundation", "partner-unicef"],
            "created_at": "2024-04-01T09:00:00.000Z",
            "updated_at": "2024-04-02T09:00:00.000Z",
        },
    ],
}

# tests/core/test_catalog.py
from programhub.core.domain.database import TableName
from programhub.core.selectors.catalog import build_catalog, build_catalog_item


class TestCatalogVisibility:

    def test_private_programs_are_hidden_by_default(self, store):
        """
        Scenario: Partner B hosts one public and one private program.
        Expected: The default catalog holds only the public one; include_private shows both.
        """
        # Arrange
        store.create_record(TableName.PARTNERS, {"id": "partner-b", "organization_name": "Partner B"})
        store.create_record(
            TableName.PROGRAMS,
            {"id": "public", "partner_id": "partner-b", "name": "Open", "is_public": True},
        )
        store.create_record(
            TableName.PROGRAMS,
            {"id": "private", "partner_id": "partner-b", "name": "Closed", "is_public": False},
        )
        database = store.load_database()

        # Act
        default_items = build_catalog(database)
        all_items = build_catalog(database, include_private=True)

        # Assert
        assert [item.id for item in default_items] == ["public"]
        assert [item.id for item in all_items] == ["public", "private"]

    def test_every_item_is_public_without_include_private(self, seeded_store):
        assert all(item.is_public for item in build_catalog(seeded_store.load_database()))


class TestCatalogItem:

    def test_host_comes_from_host_relationship(self, store, host_partner, program_x):
        store.create_record(TableName.PARTNERS, {"id": "partner-h", "organization_name": "Hosting Org"})
        store.create_record(
            TableName.PROGRAM_PARTNERS,
            {"program_id": program_x.id, "partner_id": "partner-h", "role": "host", "status": "accepted"},
        )

        item = build_catalog_item(store.load_database(), program_x)

        assert item.host_partner.id == "partner-h"

    def test_host_falls_back_to_owner(self, store, host_partner, program_x):
        item = build_catalog_item(store.load_database(), program_x)

        assert item.host_partner.id == host_partner.id

    def test_host_relationship_with_missing_partner_falls_back_to_owner(self, store, host_partner, program_x):
        store.create_record(
            TableName.PROGRAM_PARTNERS,
            {"program_id": program_x.id, "partner_id": "vanished", "role": "host"},
        )

        item = build_catalog_item(store.load_database(), program_x)

        assert item.host_partner.id == host_partner.id

    def test_supporting_partner_resolved_through_co_partners(self, store, host_partner):
        store.create_record(TableName.PARTNERS, {"id": "partner-s", "organization_name": "Supporter"})
        program = store.create_record(
            TableName.PROGRAMS,
            {
                "id": "program-s",
                "partner_id": host_partner.id,
                "name": "Supported",
                "supporting_partner_id": "partner-s",
                "supporting_partner_role": "Funding partner",
            },
        )
        store.create_record(TableName.PROGRAM_PARTNERS, {"program_id": program.id, "partner_id": "partner-s"})

        item = build_catalog_item(store.load_database(), program)

        assert item.supporting_partner.id == "partner-s"
        assert item.supporting_partner_role == "Funding partner"

    def test_supporting_partner_without_relationship_is_none(self, store, host_partner):
        store.create_record(TableName.PARTNERS, {"id": "partner-s", "organization_name": "Supporter"})
        program = store.create_record(
            TableName.PROGRAMS,
            {"partner_id": host_partner.id, "name": "Unlinked", "supporting_partner_id": "partner-s"},
        )

        assert build_catalog_item(store.load_database(), program).supporting_partner is None

    def test_cover_image_prefers_template_hero(self, store, program_x):
        store.create_record(TableName.PROGRAM_TEMPLATES, {"program_id": program_x.id, "title": "Plain"})
        store.create_record(
            TableName.PROGRAM_TEMPLATES,
            {"program_id": program_x.id, "title": "Pretty", "hero_image_url": "https://img.example/hero.jpg"},
        )

        item = build_catalog_item(store.load_database(), program_x)

        assert item.cover_image_url == "https://img.example/hero.jpg"

    def test_cover_image_falls_back_to_program_then_host_logo(self, store, host_partner, program_x):
        database = store.load_database()
        assert build_catalog_item(database, program_x).cover_image_url == host_partner.logo

        with_logo = store.update_record(TableName.PROGRAMS, program_x.id, {"logo": "https://img.example/x.png"})
        assert build_catalog_item(store.load_database(), with_logo).cover_image_url == "https://img.example/x.png"

    def test_start_month_from_template_or_start_date(self, store, host_partner, program_x):
        dated = store.update_record(TableName.PROGRAMS, program_x.id, {"start_date": "2025-03-15"})
        assert build_catalog_item(store.load_database(), dated).start_month_label == "March"

        store.create_record(
            TableName.PROGRAM_TEMPLATES,
            {"program_id": program_x.id, "title": "T", "recommended_start_month": "September"},
        )
        assert build_catalog_item(store.load_database(), dated).start_month_label == "September"

    def test_start_month_missing(self, store, program_x):
        assert build_catalog_item(store.load_database(), program_x).start_month_label is None

    def test_display_title_defaults_to_name_and_metrics_are_projected(self, store, program_x):
        store.create_record(
            TableName.INSTITUTIONS,
            {"program_id": program_x.id, "country": "IT", "student_count": 25},
        )
        store.create_record(TableName.PROGRAM_PROJECTS, {"program_id": program_x.id, "status": "active"})

        item = build_catalog_item(store.load_database(), program_x)

        assert item.display_title == "Program X"
        assert item.metrics.institutions == 1
        assert item.metrics.students == 25
        assert item.metrics.countries == 2
        assert item.metrics.active_projects == 1
        assert item.metrics.templates == 0

# tests/core/test_use_cases.py
from programhub.core.domain.database import TableName
from programhub.core.domain.seeds import DEMO_SEED
from programhub.core.use_cases.seed_database import SeedPrototypeDatabase


class TestSeedPrototypeDatabase:

    def test_seeds_every_collection(self, container, store):
        """
        Scenario: An empty store is seeded.
        Expected: Every demo record is created and seededAt is stamped.
        """
        # Act
        database = container.seed_prototype_database().execute()

        # Assert
        for table, rows in DEMO_SEED.items():
            assert len(database.table(table)) == len(rows)
        assert database.metadata.seeded_at is not None
        assert store.get_by_id(TableName.PROGRAMS, "program-climate-voices").name == "Climate Voices"

    def test_second_run_is_a_no_op(self, container, store):
        use_case = container.seed_prototype_database()
        use_case.execute()
        store.create_record(TableName.PARTNERS, {"organization_name": "Added later"})

        database = use_case.execute()

        assert len(database.partners) == len(DEMO_SEED[TableName.PARTNERS]) + 1

    def test_force_reseeds_from_scratch(self, container, store):
        use_case = container.seed_prototype_database()
        use_case.execute()
        store.create_record(TableName.PARTNERS, {"organization_name": "Added later"})

        database = use_case.execute(force=True)

        assert len(database.partners) == len(DEMO_SEED[TableName.PARTNERS])

    def test_custom_seed(self, store):
        seed = {TableName.PARTNERS: [{"id": "only", "organization_name": "Only Partner"}]}

        database = SeedPrototypeDatabase(store, seed).execute()

        assert [p.id for p in database.partners] == ["only"]
        assert database.programs == []


class TestGetProgramSummary:

    def test_execute(self, container, seeded_store):
        summary = container.get_program_summary().execute("program-playful-futures")

        assert summary.program.name == "Playful Futures"
        assert summary.metrics.student_count == 180
        assert summary.metrics.countries == ["DK", "IT"]
        assert summary.metrics.co_partner_count == 1
        assert summary.metrics.pending_invitations == 1

    def test_unknown_program(self, container, seeded_store):
        assert container.get_program_summary().execute("program-missing") is None


class TestLoadPartnerOverview:

    def test_explicit_partner(self, container, seeded_store):
        """
        Scenario: The dashboard of the partner that owns two programs and co-partners none.
        Expected: Both programs, newest first, with totals summed across them.
        """
        # Act
        overview = container.load_partner_overview().execute(partner_id="partner-save-the-children")

        # Assert
        assert [s.program.id for s in overview.summaries] == ["program-rights-lab", "program-climate-voices"]
        assert overview.context.partner.organization_name == "Save the Children Denmark"
        assert overview.metrics.total_programs == 2
        assert overview.metrics.active_programs == 1
        assert overview.metrics.students == 650
        assert overview.metrics.country_count == 2

    def test_related_programs_can_be_excluded(self, container, seeded_store):
        use_case = container.load_partner_overview()

        related = use_case.execute(partner_id="partner-lego-foundation")
        owned = use_case.execute(partner_id="partner-lego-foundation", include_related=False)

        assert {s.program.id for s in related.summaries} == {"program-playful-futures", "program-climate-voices"}
        assert [s.program.id for s in owned.summaries] == ["program-playful-futures"]

    def test_partner_resolved_from_session(self, container, seeded_store, session_provider):
        session_provider.set_session({"email": "giulia.romano@unicef.example", "role": "partner"})

        overview = container.load_partner_overview().execute()

        assert overview.context.partner_id == "partner-unicef"
        assert overview.context.partner_user.first_name == "Giulia"
        assert overview.metrics.total_programs == 2

    def test_no_session_gives_empty_overview(self, container, seeded_store):
        overview = container.load_partner_overview().execute()

        assert overview.context.partner_id is None
        assert overview.summaries == []
        assert overview.metrics.total_programs == 0


class TestBrowseProgramCatalog:

    def test_execute(self, container, seeded_store):
        items = container.browse_program_catalog().execute()

        climate = items[0]
        assert [item.id for item in items] == ["program-climate-voices", "program-playful-futures"]
        assert climate.host_partner.id == "partner-save-the-children"
        assert climate.supporting_partner.id == "partner-lego-foundation"
        assert climate.cover_image_url == "https://cdn.class2class.example/templates/climate-journal.jpg"
        assert climate.start_month_label == "September"

    def test_playful_futures_card(self, container, seeded_store):
        items = {item.id: item for item in container.browse_program_catalog().execute()}

        playful = items["program-playful-futures"]
        assert playful.host_partner.id == "partner-lego-foundation"
        assert playful.cover_image_url == "https://cdn.class2class.example/programs/playful-futures.png"
        assert playful.start_month_label == "February"
        assert playful.display_title == "Playful Futures"

    def test_include_private(self, container, seeded_store):
        items = container.browse_program_catalog().execute(include_private=True)

        assert "program-rights-lab" in [item.id for item in items]

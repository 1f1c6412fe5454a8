# programhub/core/use_cases/__init__.py
from .delete_program import DeleteProgram, cascade_delete_program
from .program_queries import BrowseProgramCatalog, GetProgramSummary, LoadPartnerOverview
from .seed_database import SeedPrototypeDatabase

__all__ = [
    "BrowseProgramCatalog",
    "DeleteProgram",
    "GetProgramSummary",
    "LoadPartnerOverview",
    "SeedPrototypeDatabase",
    "cascade_delete_program",
]

# programhub/__init__.py
"""
Program Hub - program relationship and aggregation engine.

Partners run programs; co-partners, coordinators, institutions, teachers,
projects, templates, invitations and activities hang off each program.
This package keeps all of them in one prototype document and answers the
dashboard and catalog questions asked of it.

Laid out as Ports & Adapters (Hexagonal Architecture).
"""

__version__ = "1.0.0"

"""
shipdash_api — read-only HTTP API over the shipment dataset.

Architecture:
  services/    — aggregation queries against the DuckDB shipments table
  routers/     — FastAPI endpoints: /companies, /companies/stats,
                 /companies/{name}, /shipments, /health, /ready
  middleware/  — structured request logging
  utils/       — pagination parsing, SQL filter builders, structlog setup

Start with:
    uvicorn shipdash_api.app:app --port 8000
    shipdash serve
"""

__version__ = "0.1.0"

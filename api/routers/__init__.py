"""
FastAPI routers grouped by domain (notes, health).

Each file inside this package exposes an APIRouter that is included by the
application factory in app.py.
"""

"""HTTP routers.

Routes are declared in the registry (routes/registry.py) and generated onto
an APIRouter at application construction.
"""

# app/services/__init__.py
from . import catalog
from . import aggregation
from . import presentation
from . import dashboard

# pos_frontend/modules/pos/__init__.py

"""
POS page package exports.
"""

from .controller import PosController
from .view import PosView

__all__ = ["PosController", "PosView"]

"""Application layer - editing sessions and orchestration."""

from .cart import Cart, CartItem, create_cart_item
from .dtos import LayoutDocument
from .editor import LayoutEditor
from .script import EditOperation, StepResult, apply_operation, load_script, run_script
from .shortcuts import EditorShortcuts, KeyDispatcher, KeyEvent

__all__ = [
    "Cart",
    "CartItem",
    "EditOperation",
    "EditorShortcuts",
    "KeyDispatcher",
    "KeyEvent",
    "LayoutDocument",
    "LayoutEditor",
    "StepResult",
    "apply_operation",
    "create_cart_item",
    "load_script",
    "run_script",
]

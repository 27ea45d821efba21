from .registry import AccountRegistry, format_ledger_line

__all__ = ["AccountRegistry", "format_ledger_line"]

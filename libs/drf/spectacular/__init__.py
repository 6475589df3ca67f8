from .schema_hooks import wrap_with_envelope

__all__ = ["wrap_with_envelope"]

from .base_model_mixin import ActiveFlagMixin, ActiveQuerySet, BaseModel

__all__ = ["BaseModel", "ActiveFlagMixin", "ActiveQuerySet"]

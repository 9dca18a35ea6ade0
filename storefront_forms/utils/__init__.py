from .dependencies import validated_form

__all__ = ["validated_form"]

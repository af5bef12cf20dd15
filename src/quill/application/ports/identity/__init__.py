from quill.application.ports.identity.principal import Principal

__all__ = ["Principal"]

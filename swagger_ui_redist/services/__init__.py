from .static_files import StaticFile, StaticFileRegistry, SwaggerFile

__all__ = ["StaticFile", "StaticFileRegistry", "SwaggerFile"]

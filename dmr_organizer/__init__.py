"""DMR channel organizer exports."""


def create_catalog_service(*, autosave_path=None, enable_autosave=True):
    from .channels.services import ChannelCatalogService

    return ChannelCatalogService(autosave_path=autosave_path, enable_autosave=enable_autosave)


__all__ = [
    "create_catalog_service",
]

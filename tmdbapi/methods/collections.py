"""Collection endpoints."""

from tmdbapi.core.options import RequestOptions
from tmdbapi.core.results import ResultsList
from tmdbapi.methods.base import AbstractMethod
from tmdbapi.models.common import Artwork
from tmdbapi.models.movie import CollectionInfo

BASE_COLLECTION = "collection"


class TmdbCollections(AbstractMethod):
    """Movie collections (franchises)."""

    async def get_collection_info(
        self, collection_id: int, options: RequestOptions | None = None
    ) -> CollectionInfo:
        """Get a collection with its parts."""
        api_url = self._url(BASE_COLLECTION, collection_id, options=options)
        return await self._get_model(api_url, CollectionInfo)

    async def get_collection_images(
        self, collection_id: int, options: RequestOptions | None = None
    ) -> ResultsList[Artwork]:
        """Get backdrops and posters of a collection."""
        api_url = self._url(BASE_COLLECTION, collection_id, "images", options=options)
        return await self._get_list(
            api_url, Artwork, keys=("backdrops", "posters"), source_field="artwork_type"
        )

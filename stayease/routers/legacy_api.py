"""
``/api/ForRent`` compatibility routes.

Older clients address listings with the HouseForRent naming. Every path here
is registered against the canonical handler in ``properties_api``. The one
exception is search: older clients post a filter body and expect a bare list,
not the paged envelope of ``/api/properties/search``.
"""
from typing import List
from fastapi import APIRouter, Depends

from ..repository import Repository, get_repository
from ..schemas import PropertyOut, PropertyDetailOut, PropertyFilter
from ..services.search import filter_properties
from . import properties_api

router = APIRouter(prefix="/api/ForRent", tags=["legacy"], deprecated=True)


def api_legacy_search(payload: PropertyFilter, repo: Repository = Depends(get_repository)):
    return filter_properties(repo.list_properties(), payload)


router.add_api_route("", properties_api.api_list_properties, methods=["GET"], response_model=List[PropertyOut])
router.add_api_route("/search", api_legacy_search, methods=["POST"], response_model=List[PropertyOut])
router.add_api_route("/getById/{property_id}", properties_api.api_get_property, methods=["GET"], response_model=PropertyDetailOut)
router.add_api_route("", properties_api.api_create_property, methods=["POST"], response_model=PropertyDetailOut, status_code=201)
router.add_api_route("/edit/{property_id}", properties_api.api_update_property, methods=["PUT"], response_model=PropertyDetailOut)
router.add_api_route("/delete/byId/{property_id}", properties_api.api_delete_property, methods=["DELETE"], status_code=204)

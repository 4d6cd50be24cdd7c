"""Packing list routes.

Exposes catalog selection and the criteria summary. Results are returned
as data; rendering them is left to the client.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from trail_pack.climate.classifier import InsufficientDataError
from trail_pack.config import Settings, get_settings
from trail_pack.models.equipment import EquipmentItem
from trail_pack.models.selection import (
    DestinationPreset,
    SelectionCriteria,
    SelectionResult,
)
from trail_pack.planner import PlaceNotFoundError, plan_criteria_from_place
from trail_pack.providers.base import ProviderError
from trail_pack.providers.nominatim import NominatimGeocoder
from trail_pack.providers.open_meteo import OpenMeteoArchiveProvider
from trail_pack.selection.engine import select
from trail_pack.selection.presets import DEFAULT_PRESETS, apply_preset, get_preset
from trail_pack.selection.summary import summarize

logger = logging.getLogger(__name__)

router = APIRouter()


class SelectionRequest(SelectionCriteria):
    """Selection criteria, optionally pre-filled from a destination preset."""

    preset: str | None = Field(default=None, description="Destination preset key")


class PlaceSelectionRequest(SelectionRequest):
    """Selection criteria derived from a place and a month."""

    address: str = Field(..., min_length=1, description="Trip location")
    month: int = Field(..., ge=1, le=12, description="Trip month")


class SelectionResponse(BaseModel):
    """Selected items with the criteria actually applied."""

    criteria: SelectionCriteria
    result: SelectionResult
    summary: str


def get_catalog(request: Request) -> list[EquipmentItem]:
    """Catalog loaded at startup."""
    return request.app.state.catalog or []


async def get_geocoder(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[NominatimGeocoder, None]:
    async with NominatimGeocoder(
        base_url=settings.nominatim_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout_seconds,
    ) as geocoder:
        yield geocoder


async def get_weather_provider(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[OpenMeteoArchiveProvider, None]:
    async with OpenMeteoArchiveProvider(
        base_url=settings.open_meteo_archive_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout_seconds,
    ) as weather:
        yield weather


def _base_criteria(body: SelectionRequest) -> SelectionCriteria:
    criteria = SelectionCriteria.model_validate(
        body.model_dump(include=set(SelectionCriteria.model_fields))
    )
    if body.preset:
        preset = get_preset(body.preset)
        if preset is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown destination preset: {body.preset}",
            )
        criteria = apply_preset(criteria, preset)
    return criteria


def _respond(
    catalog: list[EquipmentItem], criteria: SelectionCriteria, settings: Settings
) -> SelectionResponse:
    result = select(
        catalog,
        criteria,
        restrict_autonomy_packs=settings.autonomy_trip_pack_restriction,
    )
    return SelectionResponse(
        criteria=criteria,
        result=result,
        summary=summarize(criteria, result),
    )


@router.get("/catalog", response_model=list[EquipmentItem])
async def list_catalog(catalog: list[EquipmentItem] = Depends(get_catalog)):
    """List the normalized equipment catalog."""
    return catalog


@router.get("/presets", response_model=list[DestinationPreset])
async def list_presets():
    """List destination presets."""
    return list(DEFAULT_PRESETS.values())


@router.post("/selection", response_model=SelectionResponse)
async def create_selection(
    body: SelectionRequest,
    catalog: list[EquipmentItem] = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Select equipment for explicit criteria."""
    return _respond(catalog, _base_criteria(body), settings)


@router.post("/selection/from-place", response_model=SelectionResponse)
async def create_selection_from_place(
    body: PlaceSelectionRequest,
    catalog: list[EquipmentItem] = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
    weather: OpenMeteoArchiveProvider = Depends(get_weather_provider),
):
    """Select equipment for a place and month, deriving the climate from weather history."""
    criteria = _base_criteria(body)
    try:
        planned = await plan_criteria_from_place(
            criteria,
            body.address,
            body.month,
            geocoder=geocoder,
            weather=weather,
            thresholds=settings.climate_thresholds,
        )
    except PlaceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InsufficientDataError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except ProviderError as e:
        logger.error(f"Provider {e.provider} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Weather or geocoding service unavailable: {e}",
        )

    return _respond(catalog, planned.criteria, settings)

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from .contrast import get_contrast_ratio, meets_wcag_aa, meets_wcag_aaa
from .convert import normalize_color
from .models import NamingStrategy, OrderStrategy
from .parse import InvalidColorFormat
from .pipeline import PalettePipeline, PipelineOptions

logger = logging.getLogger(__name__)


class NormalizeRequest(BaseModel):
    color: str = Field(..., description="Hex, rgb() or hsl() color literal")


class NormalizeResponse(BaseModel):
    input: str
    hex: str
    rgba: dict[str, int | float]
    hsla: dict[str, int | float]
    oklab: dict[str, float]
    oklch: dict[str, float]


class ContrastRequest(BaseModel):
    foreground: str = Field(..., description="Text color literal")
    background: str = Field(..., description="Background color literal")


class ContrastResponse(BaseModel):
    ratio: float
    aa: bool
    aa_large: bool
    aaa: bool
    aaa_large: bool


class PaletteRequest(BaseModel):
    colors: list[str] = Field(..., description="Color literals in input order")
    names: NamingStrategy = Field(
        default=NamingStrategy.AUTO, description="Naming strategy"
    )
    order: OrderStrategy = Field(
        default=OrderStrategy.INPUT, description="Display ordering strategy"
    )
    provided_names: dict[str, str] | None = Field(
        default=None,
        description="Hex -> name overrides used by the 'provided' strategy",
    )


class PaletteItem(BaseModel):
    input: str
    hex: str
    name: str
    text_color: str
    index: int


class PaletteResponse(BaseModel):
    colors: list[str]
    palette: list[PaletteItem]


app = FastAPI(
    title="palettd API",
    version="1.0.0",
    description="Normalize, name and contrast-check palette colors.",
)


def _build_pipeline() -> PalettePipeline:
    return PalettePipeline()


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize(payload: NormalizeRequest) -> NormalizeResponse:
    try:
        color = normalize_color(payload.color)
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return NormalizeResponse(**color.to_dict())


@app.post("/contrast", response_model=ContrastResponse)
async def contrast(payload: ContrastRequest) -> ContrastResponse:
    try:
        foreground = normalize_color(payload.foreground)
        background = normalize_color(payload.background)
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    ratio = get_contrast_ratio(foreground.rgba, background.rgba)
    return ContrastResponse(
        ratio=ratio,
        aa=meets_wcag_aa(ratio),
        aa_large=meets_wcag_aa(ratio, large_text=True),
        aaa=meets_wcag_aaa(ratio),
        aaa_large=meets_wcag_aaa(ratio, large_text=True),
    )


@app.post("/palette", response_model=PaletteResponse)
async def palette(payload: PaletteRequest) -> PaletteResponse:
    pipeline = _build_pipeline()
    options = PipelineOptions(
        names=payload.names,
        order=payload.order,
        provided_names=payload.provided_names,
    )
    try:
        result = await run_in_threadpool(pipeline.run, payload.colors, options)
    except InvalidColorFormat as exc:
        logger.info("rejected palette request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    items = [
        PaletteItem(
            input=color.input,
            hex=color.hex,
            name=color.name,
            text_color=color.text_color,
            index=color.index,
        )
        for color in result.palette
    ]
    return PaletteResponse(colors=result.colors, palette=items)

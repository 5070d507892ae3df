"""FastAPI server exposing wardrobe and planner endpoints."""

from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from closet_app.app import ClosetPlannerApp
from logic.validation import ClothingItemInput, WearEventInput
from models.errors import InvalidColorFormat, ItemNotFound


class RatingRequest(BaseModel):
    """Request payload for rating a worn outfit."""

    rating: int = Field(..., ge=1, le=5, description="Star rating from 1 to 5")


def create_app(closet: ClosetPlannerApp | None = None) -> FastAPI:
    """Build the API around one closet planner instance."""

    closet = closet or ClosetPlannerApp()
    app = FastAPI(title="Closet Planner", version="0.1.0")

    @app.exception_handler(ItemNotFound)
    async def _not_found(_: Request, exc: ItemNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(InvalidColorFormat)
    async def _bad_color(_: Request, exc: InvalidColorFormat) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ValueError)
    async def _bad_value(_: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ValidationError)
    async def _invalid(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": "validation failed", "details": exc.errors(include_url=False, include_context=False)},
        )

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return closet.health()

    @app.get("/clothing")
    async def list_clothing(slot: Optional[str] = None, tag: Optional[str] = None, sort: str = "created") -> list:
        try:
            return closet.wardrobe.list_items(slot=slot, tag=tag, sort=sort)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/clothing", status_code=201)
    async def add_clothing(request: ClothingItemInput) -> dict:
        return closet.wardrobe.add_item(**request.model_dump())

    @app.put("/clothing/{item_id}")
    async def update_clothing(item_id: str, updates: dict) -> dict:
        return closet.wardrobe.update_item(item_id, updates)

    @app.delete("/clothing/{item_id}")
    async def delete_clothing(item_id: str) -> dict:
        return closet.wardrobe.remove_item(item_id)

    @app.post("/clothing/{item_id}/wear")
    async def wear_clothing(item_id: str) -> dict:
        return closet.wardrobe.wear_item(item_id)

    @app.post("/planner/daily")
    async def plan_daily() -> dict:
        """Pick today's best outfit."""

        response = closet.planner.generate_daily_outfit()
        if response.get("status") != "ok":
            raise HTTPException(status_code=400, detail=response)
        return response

    @app.post("/planner/week")
    async def plan_week() -> dict:
        """Plan Monday to Friday."""

        response = closet.planner.generate_weekly_outfits()
        if response.get("status") != "ok":
            raise HTTPException(status_code=400, detail=response)
        return response

    @app.post("/planner/wear", status_code=201)
    async def wear_outfit(request: WearEventInput) -> dict:
        return closet.wardrobe.wear_outfit(**request.model_dump(exclude_none=True))

    @app.post("/history/{entry_id}/rating")
    async def rate_outfit(entry_id: str, request: RatingRequest) -> dict:
        return closet.wardrobe.rate_outfit(entry_id=entry_id, rating=request.rating)

    @app.get("/analytics")
    async def analytics() -> dict:
        return closet.planner.wardrobe_analytics()

    return app


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=int("8080"), reload=False)

"""
FastAPI interface for the animal registry.

Run with:
    python main.py --web
    python -m uvicorn dockside.web.app:app --reload --port 8000
"""

from datetime import datetime

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from dockside import __version__
from dockside.models.animal import Animal, AnimalUpdate, Visit
from dockside.services.animal_store import AnimalStore
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


def _not_found(what: str, item_id: int) -> JSONResponse:
    logger.info("%s %d not found", what, item_id)
    return JSONResponse(status_code=404, content={"error": f"{what} {item_id} not found"})


def _conflict(message: str) -> JSONResponse:
    logger.info("Conflict: %s", message)
    return JSONResponse(status_code=409, content={"error": message})


def get_store(request: Request) -> AnimalStore:
    return request.app.state.store


def create_app(store: AnimalStore | None = None) -> FastAPI:
    """Build the API around `store` (a fresh empty store by default)."""
    app = FastAPI(
        title="Dockside Animal Registry",
        description="In-memory animals and their visits",
        version=__version__,
    )
    app.state.store = store if store is not None else AnimalStore()

    @app.get("/animals", response_model=list[Animal])
    def list_animals(store: AnimalStore = Depends(get_store)):
        """List all animals."""
        return store.list_animals()

    @app.get("/animals/{animal_id}", response_model=Animal)
    def get_animal(animal_id: int, store: AnimalStore = Depends(get_store)):
        animal = store.get_animal(animal_id)
        if animal is None:
            return _not_found("Animal", animal_id)
        return animal

    @app.post("/animals", response_model=Animal, status_code=201)
    def create_animal(animal: Animal, response: Response, store: AnimalStore = Depends(get_store)):
        try:
            store.add_animal(animal)
        except ValueError as e:
            return _conflict(str(e))
        response.headers["Location"] = f"/animals/{animal.id}"
        return animal

    @app.put("/animals/{animal_id}", status_code=204)
    def update_animal(animal_id: int, update: AnimalUpdate, store: AnimalStore = Depends(get_store)):
        """Replace an animal's editable fields."""
        if store.update_animal(animal_id, update) is None:
            return _not_found("Animal", animal_id)
        return Response(status_code=204)

    @app.delete("/animals/{animal_id}", response_model=Animal)
    def delete_animal(animal_id: int, store: AnimalStore = Depends(get_store)):
        """Delete an animal and return the deleted record."""
        removed = store.delete_animal(animal_id)
        if removed is None:
            return _not_found("Animal", animal_id)
        return removed

    @app.get("/animals/{animal_id}/visits", response_model=list[Visit])
    def list_animal_visits(animal_id: int, store: AnimalStore = Depends(get_store)):
        return store.visits_for_animal(animal_id)

    @app.get("/visits", response_model=list[Visit])
    def list_visits(store: AnimalStore = Depends(get_store)):
        return store.list_visits()

    @app.post("/visits", response_model=Visit, status_code=201)
    def create_visit(visit: Visit, response: Response, store: AnimalStore = Depends(get_store)):
        try:
            store.add_visit(visit)
        except ValueError as e:
            return _conflict(str(e))
        response.headers["Location"] = f"/visits/{visit.id}"
        return visit

    @app.get("/health")
    def health_check(store: AnimalStore = Depends(get_store)):
        return {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            **store.counts,
        }

    return app


app = create_app()

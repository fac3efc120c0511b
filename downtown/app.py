from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, status

from .dependencies import get_directory
from .directory.errors import NotFoundError, ValidationError
from .directory.models import Business, BusinessCreate, Review, ReviewIn
from .directory.repository import BusinessRepository
from .directory.seed import build_seeded_repository
from .directory.service import DirectoryService
from .enrichment.reviews import ReviewAggregator
from .enrichment.sync import YelpSync
from .yelp.client import YelpClient, YelpConfigurationError, YelpServiceError

router = APIRouter()


# ── Public endpoints ─────────────────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/categories")
def categories(directory: DirectoryService = Depends(get_directory)) -> list[str]:
    return directory.categories()


# ── Business endpoints ───────────────────────────────────────────────────


@router.get("/api/businesses", response_model=list[Business])
def list_businesses(
    open_only: bool = Query(default=False),
    directory: DirectoryService = Depends(get_directory),
) -> list[Business]:
    return directory.list_businesses(open_only=open_only)


@router.post("/api/businesses", response_model=Business, status_code=status.HTTP_201_CREATED)
def create_business(
    body: BusinessCreate,
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    return directory.create_business(body)


@router.get("/api/businesses/search", response_model=list[Business])
def search_businesses(
    q: str | None = Query(default=None),
    open_only: bool = Query(default=False),
    directory: DirectoryService = Depends(get_directory),
) -> list[Business]:
    try:
        return directory.search(q, open_only=open_only)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/api/businesses/category/{category}", response_model=list[Business])
def businesses_by_category(
    category: str,
    open_only: bool = Query(default=False),
    directory: DirectoryService = Depends(get_directory),
) -> list[Business]:
    return directory.list_by_category(category, open_only=open_only)


@router.get("/api/businesses/{business_id}", response_model=Business)
def get_business(
    business_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    try:
        return directory.get_business(business_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found") from exc


# ── Review endpoints ─────────────────────────────────────────────────────


@router.get("/api/businesses/{business_id}/reviews", response_model=list[Review])
def get_reviews(
    business_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> list[Review]:
    # Yelp failures never reach here; the aggregator degrades to local reviews.
    try:
        return directory.get_reviews(business_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found") from exc


@router.post(
    "/api/businesses/{business_id}/reviews",
    response_model=Review,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    business_id: str,
    body: ReviewIn,
    directory: DirectoryService = Depends(get_directory),
) -> Review:
    try:
        return directory.add_review(business_id, body)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found") from exc


# ── Yelp sync ────────────────────────────────────────────────────────────


@router.post("/api/businesses/{business_id}/sync-yelp", response_model=Business)
def sync_yelp(
    business_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    try:
        return directory.sync_from_yelp(business_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Business not found or no Yelp ID"
        ) from exc
    except YelpConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except YelpServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to sync with Yelp") from exc


def create_app(
    repository: BusinessRepository | None = None,
    yelp_client: YelpClient | None = None,
) -> FastAPI:
    """Build the API around an explicit repository and Yelp client."""
    if repository is None:
        repository = build_seeded_repository()
    if yelp_client is None:
        yelp_client = YelpClient()

    application = FastAPI(title="Downtown Business Directory API", version="1.0.0")
    application.state.directory = DirectoryService(
        repository,
        ReviewAggregator(repository, yelp_client),
        YelpSync(repository, yelp_client),
    )
    application.include_router(router)
    return application


app = create_app()

from fastapi import APIRouter, Depends, Query, BackgroundTasks, Request
from typing import Optional
import logging
import time

from ..core.config import settings
from ..schemas.search_schemas import CONTENT_TYPE_LABELS, SearchFilters, SearchQuery
from ..services.site_search import SiteSearchOrchestrator, SearchValidator, ValidationError
from ..utils.custom_utils import generate_response

router = APIRouter(prefix="/search", tags=["Search"])
logger = logging.getLogger(__name__)


# Dependency to get the process-wide site search service
def get_site_search_service(request: Request) -> SiteSearchOrchestrator:
    service = getattr(request.app.state, "site_search", None)
    if service is None:
        service = SiteSearchOrchestrator(getattr(request.app.state, "redis", None))
        request.app.state.site_search = service
    return service


def get_search_validator() -> SearchValidator:
    return SearchValidator()


@router.get("")
async def search_site(
    background_tasks: BackgroundTasks,
    q: Optional[str] = Query(None, description="The search query (2-100 characters)"),
    lang: Optional[str] = Query(settings.default_language, description="Result language: en or es"),
    types: Optional[str] = Query(None, description="Comma-separated content types to include"),
    jurisdiction: Optional[str] = Query(None, description="Jurisdiction filter, e.g. CA or federal"),
    limit: Optional[int] = Query(None, description="Maximum number of results to return"),
    offset: Optional[int] = Query(0, description="Number of results to skip"),
    no_cache: bool = Query(False, description="Bypass the response cache"),
    service: SiteSearchOrchestrator = Depends(get_site_search_service),
    validator: SearchValidator = Depends(get_search_validator)
):
    """
    Search legal glossary terms, charges, diversion programs, expungement rules,
    court preparation and rights information.
    """
    try:
        start_time = time.time()

        query = SearchQuery(
            query=validator.validate_search_query(q),
            language=validator.validate_language(lang),
            filters=SearchFilters(
                types=validator.validate_content_types(types),
                jurisdiction=validator.validate_jurisdiction(jurisdiction)
            ),
            limit=validator.validate_limit(limit),
            offset=validator.validate_offset(offset)
        )

        search_results, cache_status = await service.search_site(
            query, background_tasks=background_tasks, no_cache=no_cache
        )

        response_time = time.time() - start_time

        return generate_response(
            status_code=200,
            response_message="Search completed successfully",
            customer_message="Search completed successfully",
            body={
                **search_results,
                "metadata": {
                    "response_time_ms": round(response_time * 1000, 2),
                    "cache_status": cache_status,
                    "language": query.language.value,
                    "limit": query.limit,
                    "offset": query.offset
                }
            }
        )
    except ValidationError as e:
        return generate_response(
            status_code=400,
            response_message=str(e),
            customer_message=str(e),
            body=None
        )
    except Exception as e:
        logger.error(f"Error performing site search: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error performing search: {str(e)}",
            customer_message="An error occurred while performing the search",
            body=None
        )


@router.get("/stats")
async def get_search_stats(
    service: SiteSearchOrchestrator = Depends(get_site_search_service)
):
    """
    Get document counts for the search index.
    """
    try:
        start_time = time.time()

        stats = service.get_index_stats()

        response_time = time.time() - start_time

        return generate_response(
            status_code=200,
            response_message="Search index statistics retrieved successfully",
            customer_message="Search index statistics retrieved successfully",
            body={
                **stats.dict(),
                "content_type_labels": CONTENT_TYPE_LABELS,
                "metadata": {
                    "response_time_ms": round(response_time * 1000, 2)
                }
            }
        )
    except Exception as e:
        logger.error(f"Error retrieving search index statistics: {e}")
        return generate_response(
            status_code=500,
            response_message=f"Error retrieving search index statistics: {str(e)}",
            customer_message="An error occurred while retrieving search statistics",
            body=None
        )

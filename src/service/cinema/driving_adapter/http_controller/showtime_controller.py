from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.showtime_command_use_case import ShowtimeCommandUseCase
from src.service.cinema.app.query.catalog_query_use_case import CatalogQueryUseCase
from src.service.cinema.app.query.get_available_seats_use_case import GetAvailableSeatsUseCase
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
    require_user,
)
from src.service.cinema.driving_adapter.http_controller.movie_controller import (
    get_catalog_query_use_case,
)
from src.service.cinema.driving_adapter.http_controller.schema.showtime_schema import (
    ShowtimeRequest,
    ShowtimeResponse,
)


router = APIRouter()


def _to_response(showtime: ShowtimeEntity) -> ShowtimeResponse:
    return ShowtimeResponse(
        id=showtime.id or 0,
        movie_id=showtime.movie_id,
        start_time=showtime.start_time,
        capacity=showtime.capacity,
        reserved=showtime.reserved,
        available=showtime.available_count,
    )


@router.get('', response_model=List[ShowtimeResponse], dependencies=[Depends(require_user)])
@Logger.io
async def list_showtimes(
    movie_id: Optional[int] = None,
    use_case: CatalogQueryUseCase = Depends(get_catalog_query_use_case),
) -> List[ShowtimeResponse]:
    return [_to_response(showtime) for showtime in await use_case.list_showtimes(movie_id=movie_id)]


@router.get('/seats/{showtime_id}', response_model=List[str], dependencies=[Depends(require_user)])
@Logger.io
async def get_available_seats(
    showtime_id: int,
    use_case: GetAvailableSeatsUseCase = Depends(GetAvailableSeatsUseCase.depends),
) -> List[str]:
    return await use_case.get_available_seats(showtime_id=showtime_id)


@router.post(
    '/add',
    response_model=ShowtimeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
@Logger.io
async def add_showtime(
    request: ShowtimeRequest,
    use_case: ShowtimeCommandUseCase = Depends(ShowtimeCommandUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.create_showtime(
        movie_id=request.movie_id, start_time=request.start_time, capacity=request.capacity
    )
    return _to_response(showtime)


@router.put(
    '/update/{showtime_id}',
    response_model=ShowtimeResponse,
    dependencies=[Depends(require_admin)],
)
@Logger.io
async def update_showtime(
    showtime_id: int,
    request: ShowtimeRequest,
    use_case: ShowtimeCommandUseCase = Depends(ShowtimeCommandUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.update_showtime(
        showtime_id=showtime_id,
        movie_id=request.movie_id,
        start_time=request.start_time,
        capacity=request.capacity,
    )
    return _to_response(showtime)


@router.delete('/delete/{showtime_id}', dependencies=[Depends(require_admin)])
@Logger.io
async def delete_showtime(
    showtime_id: int,
    use_case: ShowtimeCommandUseCase = Depends(ShowtimeCommandUseCase.depends),
) -> dict[str, str]:
    await use_case.delete_showtime(showtime_id=showtime_id)
    return {'message': 'Showtime deleted successfully'}


@router.get('/{showtime_id}', response_model=ShowtimeResponse, dependencies=[Depends(require_user)])
@Logger.io
async def get_showtime(
    showtime_id: int,
    use_case: CatalogQueryUseCase = Depends(get_catalog_query_use_case),
) -> ShowtimeResponse:
    return _to_response(await use_case.get_showtime(showtime_id=showtime_id))

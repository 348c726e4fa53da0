from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.exceptions import DataNotFoundError
from ...schemas.person import PersonForm, PersonView
from ...services.person_service import PersonService
from ..deps import get_person_service

router = APIRouter()


@router.post("", response_model=PersonView, status_code=status.HTTP_201_CREATED)
def create_person(payload: PersonForm, service: PersonService = Depends(get_person_service)):
    return service.create(payload)


@router.get("", response_model=List[PersonView])
def list_persons(service: PersonService = Depends(get_person_service)):
    return service.find_all()


@router.get("/{person_id}", response_model=PersonView)
def get_person(person_id: int, service: PersonService = Depends(get_person_service)):
    try:
        return service.find_by_id(person_id)
    except DataNotFoundError as e:
        raise HTTPException(404, str(e))


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int, service: PersonService = Depends(get_person_service)):
    service.delete(person_id)

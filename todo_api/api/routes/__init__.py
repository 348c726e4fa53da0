from fastapi import APIRouter
from . import persons, tasks

router = APIRouter()

router.include_router(persons.router, prefix="/persons", tags=["Persons"])
router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

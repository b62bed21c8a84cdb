import logging
from typing import List
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.entities.user_classes import UserEntity
from domain.models.department_models import DepartmentCreate, DepartmentPatch, DepartmentRead, DepartmentUpdate
from domain.models.response_models import ApiResponse, PagedData
from application.use_cases.department_use_cases import DepartmentUseCases
from application.use_cases.security import require_permission
from application.utils.utils import check_id

router_v1 = APIRouter(prefix="/api/v1/departamento", tags=["departamentos v1"])
router_v2 = APIRouter(prefix="/api/v2/departamento", tags=["departamentos v2"])

logger = logging.getLogger(__name__)

@router_v1.get("", response_model=ApiResponse[List[DepartmentRead]])
def list_departments(
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    logger.info("Listando todos os departamentos (v1)")
    data = DepartmentUseCases(db).list_all().unwrap()
    return ApiResponse.ok(data, "Departamentos listados com sucesso")

@router_v2.get("", response_model=ApiResponse[PagedData[DepartmentRead]])
def list_departments_paged(
    page_number: int = Query(1, description="Página (começa em 1)"),
    page_size: int = Query(10, description="Itens por página (máximo 100)"),
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    logger.info("Listando departamentos com paginação - Página %s, Tamanho %s", page_number, page_size)
    data = DepartmentUseCases(db).get_paged(page_number, page_size).unwrap()
    return ApiResponse.ok(data, "Departamentos listados com paginação")

@router_v1.get("/{department_id}", response_model=ApiResponse[DepartmentRead])
@router_v2.get("/{department_id}", response_model=ApiResponse[DepartmentRead])
def get_department(
    department_id: int,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    check_id(department_id)
    logger.info("Buscando departamento ID %s", department_id)
    data = DepartmentUseCases(db).get_by_id(department_id).unwrap()
    return ApiResponse.ok(data, "Departamento retornado com sucesso")

@router_v1.post("", status_code=201, response_model=ApiResponse[DepartmentRead])
@router_v2.post("", status_code=201, response_model=ApiResponse[DepartmentRead])
def create_department(
    payload: DepartmentCreate,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("POST")),
):
    logger.info("Criando novo departamento: %s", payload.name)
    data = DepartmentUseCases(db).create(payload).unwrap()
    return ApiResponse.ok(data, "Departamento criado com sucesso")

@router_v1.put("/{department_id}", response_model=ApiResponse[DepartmentRead])
@router_v2.put("/{department_id}", response_model=ApiResponse[DepartmentRead])
def update_department(
    department_id: int,
    payload: DepartmentUpdate,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("PUT")),
):
    check_id(department_id)
    logger.info("Atualizando departamento ID %s", department_id)
    data = DepartmentUseCases(db).update(department_id, payload).unwrap()
    return ApiResponse.ok(data, "Departamento atualizado com sucesso")

@router_v2.patch("/{department_id}", response_model=ApiResponse[DepartmentRead])
def patch_department(
    department_id: int,
    payload: DepartmentPatch,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("PATCH")),
):
    check_id(department_id)
    logger.info("Atualizando parcialmente departamento ID %s (PATCH v2)", department_id)
    data = DepartmentUseCases(db).patch(department_id, payload).unwrap()
    return ApiResponse.ok(data, "Departamento atualizado parcialmente com sucesso")

@router_v1.delete("/{department_id}", status_code=204, response_class=Response)
@router_v2.delete("/{department_id}", status_code=204, response_class=Response)
def delete_department(
    department_id: int,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("DELETE")),
):
    check_id(department_id)
    logger.info("Deletando departamento ID %s", department_id)
    DepartmentUseCases(db).delete(department_id).unwrap()
    return Response(status_code=204)

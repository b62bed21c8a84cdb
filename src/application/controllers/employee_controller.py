import logging
from typing import List
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.entities.user_classes import UserEntity
from domain.models.employee_models import EmployeeCreate, EmployeePatch, EmployeeRead, EmployeeUpdate
from domain.models.response_models import ApiResponse, PagedData
from application.use_cases.employee_use_cases import EmployeeUseCases
from application.use_cases.security import require_permission
from application.utils.utils import check_id

# v1: CRUD básico. v2: mesmas rotas + paginação e PATCH.
router_v1 = APIRouter(prefix="/api/v1/funcionario", tags=["funcionarios v1"])
router_v2 = APIRouter(prefix="/api/v2/funcionario", tags=["funcionarios v2"])

logger = logging.getLogger(__name__)

@router_v1.get("", response_model=ApiResponse[List[EmployeeRead]])
def list_employees(
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    logger.info("Listando todos os funcionários (v1)")
    data = EmployeeUseCases(db).list_all().unwrap()
    return ApiResponse.ok(data, "Funcionários listados com sucesso")

@router_v2.get("", response_model=ApiResponse[PagedData[EmployeeRead]])
def list_employees_paged(
    page_number: int = Query(1, description="Página (começa em 1)"),
    page_size: int = Query(10, description="Itens por página (máximo 100)"),
    active: bool | None = Query(None, description="Filtra por funcionários ativos/inativos"),
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    logger.info("Listando funcionários com paginação - Página %s, Tamanho %s", page_number, page_size)
    data = EmployeeUseCases(db).get_paged(page_number, page_size, active).unwrap()
    return ApiResponse.ok(data, "Funcionários listados com paginação")

@router_v1.get("/{employee_id}", response_model=ApiResponse[EmployeeRead])
@router_v2.get("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("GET")),
):
    check_id(employee_id)
    logger.info("Buscando funcionário ID %s", employee_id)
    data = EmployeeUseCases(db).get_by_id(employee_id).unwrap()
    return ApiResponse.ok(data, "Funcionário retornado com sucesso")

@router_v1.post("", status_code=201, response_model=ApiResponse[EmployeeRead])
@router_v2.post("", status_code=201, response_model=ApiResponse[EmployeeRead])
def create_employee(
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("POST")),
):
    logger.info("Criando novo funcionário: %s", payload.name)
    data = EmployeeUseCases(db).create(payload).unwrap()
    return ApiResponse.ok(data, "Funcionário criado com sucesso")

@router_v1.put("/{employee_id}", response_model=ApiResponse[EmployeeRead])
@router_v2.put("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("PUT")),
):
    check_id(employee_id)
    logger.info("Atualizando funcionário ID %s", employee_id)
    data = EmployeeUseCases(db).update(employee_id, payload).unwrap()
    return ApiResponse.ok(data, "Funcionário atualizado com sucesso")

@router_v2.patch("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def patch_employee(
    employee_id: int,
    payload: EmployeePatch,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("PATCH")),
):
    check_id(employee_id)
    logger.info("Atualizando parcialmente funcionário ID %s (PATCH v2)", employee_id)
    data = EmployeeUseCases(db).patch(employee_id, payload).unwrap()
    return ApiResponse.ok(data, "Funcionário atualizado parcialmente com sucesso")

@router_v1.delete("/{employee_id}", status_code=204, response_class=Response)
@router_v2.delete("/{employee_id}", status_code=204, response_class=Response)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_permission("DELETE")),
):
    check_id(employee_id)
    logger.info("Deletando funcionário ID %s", employee_id)
    EmployeeUseCases(db).delete(employee_id).unwrap()
    return Response(status_code=204)

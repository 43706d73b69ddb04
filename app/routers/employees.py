# app/routers/employees.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.database import get_db
from app.models.employees import Employee
from app.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate

router = APIRouter(prefix="/employee", tags=["Employees"])

logger = logging.getLogger("app")


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(employee_data: EmployeeCreate, db: Session = Depends(get_db)):
    employee = Employee(**employee_data.model_dump())

    try:
        db.add(employee)
        db.commit()
        db.refresh(employee)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create employee")
        raise StorageError.wrap("Failed to create employee", exc) from exc

    return employee


@router.get("", response_model=list[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)):
    try:
        return db.query(Employee).order_by(Employee.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch employees")
        raise StorageError.wrap("Failed to fetch employees", exc) from exc


@router.put("", response_model=EmployeeResponse | None)
def update_employee(employee_data: EmployeeUpdate, db: Session = Depends(get_db)):
    try:
        employee = db.get(Employee, employee_data.id, with_for_update=True)
        if employee is None:
            logger.info(f"Employee {employee_data.id} not found, nothing updated")
            return None

        for field, value in employee_data.changes().items():
            setattr(employee, field, value)

        db.commit()
        db.refresh(employee)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update employee")
        raise StorageError.wrap("Failed to update employee", exc) from exc

    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    try:
        db.query(Employee).filter(Employee.id == employee_id).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete employee")
        raise StorageError.wrap("Failed to delete employee", exc) from exc

    return None

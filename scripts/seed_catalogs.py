# flake8: noqa
# scripts/seed_catalogs.py

"""
참조 카탈로그(분석 메소드, 직원)를 CSV 파일에서 적재하는 CLI 입니다.
여러 번 실행해도 결과가 같습니다.
- methods.csv  : method_number,revision_number,compound,air_loq,surface_loq  (복합 키 기준 병합)
- employees.csv: name,role  (같은 이름/역할 쌍이 없을 때만 추가)
"""

import asyncio
import csv
import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import AsyncSessionLocal, atomic, create_db_and_tables
from app.domains.catalog import crud as catalog_crud
from app.domains.catalog import schemas as catalog_schemas

logger = logging.getLogger(__name__)

cli = typer.Typer()


def _read_rows(path: Path):
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


async def load_catalogs(
    db: AsyncSession,
    methods_csv: Optional[Path] = None,
    employees_csv: Optional[Path] = None,
) -> Tuple[int, int]:
    """
    CSV 행을 카탈로그 테이블에 반영하고 (병합된 메소드 수, 추가된 직원 수)를 반환합니다.
    한 행이라도 잘못되면 전체가 롤백됩니다.
    """
    merged_methods = 0
    added_employees = 0

    async with atomic(db):
        if methods_csv is not None:
            for row in _read_rows(methods_csv):
                method_in = catalog_schemas.MethodCreate.model_validate(row)
                await catalog_crud.method.merge(db, obj_in=method_in)
                merged_methods += 1

        if employees_csv is not None:
            for row in _read_rows(employees_csv):
                employee_in = catalog_schemas.EmployeeCreate.model_validate(row)
                existing = await catalog_crud.employee.get_by_name_and_role(
                    db, name=employee_in.name, role=employee_in.role
                )
                if existing is None:
                    await catalog_crud.employee.create(db, obj_in=employee_in.model_dump())
                    added_employees += 1

    logger.info("Catalog load: %d method(s) merged, %d employee(s) added", merged_methods, added_employees)
    return merged_methods, added_employees


@cli.command()
def main(
    methods: Optional[Path] = typer.Option(
        None, '--methods', '-m', exists=True, dir_okay=False,
        help="분석 메소드 CSV 파일 경로입니다."
    ),
    employees: Optional[Path] = typer.Option(
        None, '--employees', '-e', exists=True, dir_okay=False,
        help="직원 CSV 파일 경로입니다."
    ),
    create_tables: bool = typer.Option(
        False, '--create-tables',
        help="적재 전에 테이블을 생성합니다. (개발용, 운영 DB는 alembic upgrade head 사용)"
    ),
):
    """
    SBTS 참조 카탈로그를 CSV 파일에서 적재합니다.
    """
    if methods is None and employees is None:
        print("오류: --methods 또는 --employees 중 하나 이상을 지정해야 합니다.")
        raise typer.Abort()

    async def run_load():
        if create_tables:
            await create_db_and_tables()
        async with AsyncSessionLocal() as db:
            return await load_catalogs(db, methods_csv=methods, employees_csv=employees)

    merged_methods, added_employees = asyncio.run(run_load())
    print(f"메소드 {merged_methods}건 병합, 직원 {added_employees}건 추가 완료.")


if __name__ == "__main__":
    cli()

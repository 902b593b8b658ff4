# tests/domains/test_lims_n.py

"""
'lims' 도메인 (의뢰 접수 및 분석 진행 관리) 관련 CRUD 및 API 엔드포인트에 대한 테스트 모듈입니다.

- 의뢰 접수: 시료 순번, 측정 유형 규칙, 전부-아니면-전무 롤백.
- 프로젝트 생성: 참조 검사, 기본 보고 단위, 납기일 메타데이터.
- 분석 메타데이터 필드 그룹: 기본값 생성, 그룹 간 교환 법칙, 멱등성, 일자 순서.
"""

from datetime import date
from typing import Any, Callable, Dict

import pytest
from httpx import AsyncClient
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import atomic
from app.core.exceptions import ConstraintViolationError, NotFoundError
from app.domains.clients import models as clients_models
from app.domains.lims import crud as lims_crud
from app.domains.lims import models as lims_models
from app.domains.lims import schemas as lims_schemas

from tests.conftest import make_submission


async def _count(db: AsyncSession, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


async def _samples(db: AsyncSession, report_id: int):
    statement = (
        select(lims_models.Sample)
        .where(lims_models.Sample.report_id == report_id)
        .order_by(lims_models.Sample.sample_seq)
    )
    return (await db.execute(statement)).scalars().all()


def _metadata_state(db_obj: lims_models.AnalysisMetadata) -> Dict[str, Any]:
    return lims_schemas.AnalysisMetadataResponse.model_validate(db_obj).model_dump(exclude={"report_id"})


# =============================================================================
# 1. 고객 의뢰 접수 테스트
# =============================================================================
@pytest.mark.asyncio
async def test_submit_intake_success(client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any]):
    """
    [성공] 공기/표면 시료 2건 접수 시 보고서 번호가 발급되고 시료 순번이 1, 2인지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_success ---")
    response = await client.post("/api/v1/lims/intakes", json=make_submission())
    print(f"Response: {response.json()}")

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Data successfully submitted!"
    report_id = data["report_id"]

    samples = await _samples(db_session, report_id)
    assert [s.sample_seq for s in samples] == [1, 2]
    assert [s.client_assigned_name for s in samples] == ["S-air", "S-surface"]
    assert (samples[0].air_volume, samples[0].surface_area) == (10, None)
    assert (samples[1].air_volume, samples[1].surface_area) == (None, 5)

    intake = await db_session.get(lims_models.Intake, report_id)
    assert intake.last_sample_seq == 2
    assert intake.reporting_unit_air is None


@pytest.mark.asyncio
async def test_submit_intake_dense_sequence(submit_intake: Callable, db_session: AsyncSession):
    """
    [성공] 시료 수와 관계없이 순번이 1부터 빈틈 없이 발급되는지 테스트합니다.
    신고 시료 수(num_samples)와 실제 건수가 달라도 거부하지 않습니다.
    """
    print("\n--- Running test_submit_intake_dense_sequence ---")
    samples = [
        {"client_name": f"S{i}", "date_sampled": "2024-02-01", "surface_area": i}
        for i in range(1, 8)
    ]
    report_id = await submit_intake(samples=samples, num_samples=3)

    rows = await _samples(db_session, report_id)
    assert [s.sample_seq for s in rows] == list(range(1, 8))
    assert [s.client_assigned_name for s in rows] == [f"S{i}" for i in range(1, 8)]


@pytest.mark.asyncio
async def test_claim_sample_seqs_continues_counter(submit_intake: Callable, db_session: AsyncSession):
    """
    [성공] 순번 발급이 의뢰 행의 카운터에서 이어지는지 테스트합니다.
    """
    print("\n--- Running test_claim_sample_seqs_continues_counter ---")
    report_id = await submit_intake()

    async with atomic(db_session):
        claimed = await lims_crud.intake.claim_sample_seqs(db_session, report_id=report_id, count=3)

    assert list(claimed) == [3, 4, 5]
    intake = await db_session.get(lims_models.Intake, report_id, populate_existing=True)
    assert intake.last_sample_seq == 5


@pytest.mark.asyncio
async def test_submit_intake_normalizes_datetime(submit_intake: Callable, db_session: AsyncSession):
    """
    [성공] 일시 형식의 채취 일자가 날짜로 변환되어 저장되는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_normalizes_datetime ---")
    report_id = await submit_intake(samples=[
        {"client_name": "S1", "date_sampled": "2024-01-05T13:45:00", "air_volume": 1.5},
    ])

    rows = await _samples(db_session, report_id)
    assert rows[0].date_sampled == date(2024, 1, 5)


@pytest.mark.asyncio
@pytest.mark.parametrize("date_sampled, expected", [
    ("2024-01-05T23:30:00-08:00", date(2024, 1, 6)),
    ("2024-01-06T02:00:00+09:00", date(2024, 1, 5)),
    ("2024-01-05T10:00:00Z", date(2024, 1, 5)),
])
async def test_submit_intake_normalizes_offset_datetime_to_utc(
    submit_intake: Callable, db_session: AsyncSession, date_sampled: str, expected: date
):
    """
    [성공] 시간대가 있는 채취 일시는 UTC 기준 날짜로 저장되는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_normalizes_offset_datetime_to_utc ---")
    report_id = await submit_intake(samples=[
        {"client_name": "S1", "date_sampled": date_sampled, "surface_area": 2},
    ])

    rows = await _samples(db_session, report_id)
    assert rows[0].date_sampled == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("measurement", [
    {"air_volume": 0, "surface_area": 5},
    {"air_volume": "", "surface_area": 5},
    {"air_volume": None, "surface_area": 5, "mass": 0},
])
async def test_submit_intake_treats_blank_measurement_as_unset(
    client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any], measurement: Dict[str, Any]
):
    """
    [성공] 0이나 빈 문자열로 온 측정값은 미지정으로 보고 표면 시료로 접수되는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_treats_blank_measurement_as_unset ---")
    samples = [{"client_name": "Blank", "date_sampled": "2024-01-05", **measurement}]
    response = await client.post("/api/v1/lims/intakes", json=make_submission(samples=samples))
    print(f"Response: {response.json()}")

    assert response.status_code == 201
    rows = await _samples(db_session, response.json()["report_id"])
    assert (rows[0].air_volume, rows[0].surface_area, rows[0].mass) == (None, 5, None)


@pytest.mark.asyncio
@pytest.mark.parametrize("measurement", [
    {"air_volume": 10, "surface_area": 5},
    {},
    {"air_volume": 0},
    {"air_volume": "", "surface_area": ""},
    {"air_volume": -1, "surface_area": 5},
])
async def test_submit_intake_rejects_measurement_type(
    client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any], measurement: Dict[str, Any]
):
    """
    [실패/유효성] 공기 부피/표면적이 둘 다 있거나 둘 다 없으면 400이며 어떤 행도 기록되지 않는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_rejects_measurement_type ---")
    samples = [{"client_name": "Bad", "date_sampled": "2024-01-05", **measurement}]
    response = await client.post("/api/v1/lims/intakes", json=make_submission(samples=samples))
    print(f"Response: {response.json()}")

    assert response.status_code == 400
    assert await _count(db_session, clients_models.Client) == 0
    assert await _count(db_session, lims_models.Intake) == 0
    assert await _count(db_session, lims_models.Sample) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    make_submission(samples=[]),
    make_submission(email="bad-email"),
    make_submission(num_samples=0),
    {"samples": make_submission()["samples"]},
    make_submission(samples=[{"client_name": "NoDate", "air_volume": 1}]),
])
async def test_submit_intake_rejects_invalid_payload(
    client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any], body: Dict[str, Any]
):
    """
    [실패/유효성] 필수값 누락/형식 오류는 400이며 어떤 행도 기록되지 않는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_rejects_invalid_payload ---")
    response = await client.post("/api/v1/lims/intakes", json=body)

    assert response.status_code == 400
    assert isinstance(response.json()["detail"], str)
    assert await _count(db_session, clients_models.Client) == 0


@pytest.mark.asyncio
async def test_submit_intake_unknown_method_rolls_back_client(
    client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any]
):
    """
    [실패] 존재하지 않는 메소드/리비전이면 400이며, 앞 단계의 고객 upsert도 롤백되는지 테스트합니다.
    """
    print("\n--- Running test_submit_intake_unknown_method_rolls_back_client ---")
    response = await client.post("/api/v1/lims/intakes", json=make_submission(method_id=999, revision=0))
    print(f"Response: {response.json()}")

    assert response.status_code == 400
    assert "999" in response.json()["detail"]
    assert await _count(db_session, clients_models.Client) == 0
    assert await _count(db_session, lims_models.Intake) == 0


@pytest.mark.asyncio
async def test_sample_measurement_check_constraint(submit_intake: Callable, db_session: AsyncSession):
    """
    [실패] 저장소의 측정 유형 제약을 어기면 ConstraintViolationError(400)로 변환되는지 테스트합니다.
    """
    print("\n--- Running test_sample_measurement_check_constraint ---")
    report_id = await submit_intake()

    with pytest.raises(ConstraintViolationError) as exc_info:
        async with atomic(db_session):
            db_session.add(lims_models.Sample(
                report_id=report_id, sample_seq=9, client_assigned_name="Both",
                date_sampled=date(2024, 1, 1), air_volume=1.0, surface_area=1.0,
            ))
            await db_session.flush()

    assert exc_info.value.status_code == 400
    assert "Database constraint violation" in exc_info.value.detail
    assert len(await _samples(db_session, report_id)) == 2


# =============================================================================
# 2. 프로젝트 생성 테스트
# =============================================================================
async def _client_id(db: AsyncSession, submit_intake: Callable) -> int:
    report_id = await submit_intake()
    intake = await db.get(lims_models.Intake, report_id)
    return intake.client_id


@pytest.mark.asyncio
async def test_create_project_with_defaults(
    client: AsyncClient, db_session: AsyncSession, submit_intake: Callable
):
    """
    [성공] 보고 단위 기본값이 채워지고 납기일이 없으면 메타데이터가 생성되지 않는지 테스트합니다.
    """
    print("\n--- Running test_create_project_with_defaults ---")
    client_id = await _client_id(db_session, submit_intake)
    body = {"client_id": client_id, "num_samples": 4, "method": 202, "revision": 0}

    response = await client.post("/api/v1/lims/projects", json=body)
    print(f"Response: {response.json()}")

    assert response.status_code == 201
    assert response.json()["success"] is True
    report_id = response.json()["report_id"]

    intake = await db_session.get(lims_models.Intake, report_id)
    assert intake.reporting_unit_air == "ng/m³"
    assert intake.reporting_unit_surface == "ng/cm²"
    assert await db_session.get(lims_models.AnalysisMetadata, report_id) is None


@pytest.mark.asyncio
async def test_create_project_with_due_date(
    client: AsyncClient, db_session: AsyncSession, submit_intake: Callable
):
    """
    [성공] 납기일이 있으면 기본값으로 채워진 메타데이터가 같은 트랜잭션에서 생성되는지 테스트합니다.
    """
    print("\n--- Running test_create_project_with_due_date ---")
    client_id = await _client_id(db_session, submit_intake)
    body = {
        "client_id": client_id, "num_samples": 4, "method": 202, "revision": 0,
        "reporting_unit_air": "µg/m³", "due_date": "2024-03-15",
    }

    response = await client.post("/api/v1/lims/projects", json=body)

    assert response.status_code == 201
    report_id = response.json()["report_id"]

    intake = await db_session.get(lims_models.Intake, report_id)
    assert intake.reporting_unit_air == "µg/m³"

    metadata = await db_session.get(lims_models.AnalysisMetadata, report_id)
    assert metadata.due_date == date(2024, 3, 15)
    assert metadata.num_samples_analyzed == 4
    assert metadata.conditions_upon_arrival == "Not specified"
    assert metadata.storage_conditions == "Not specified"
    assert metadata.analysis_unit == "ng"


@pytest.mark.asyncio
@pytest.mark.parametrize("overrides", [
    {"client_id": 9999},
    {"method": 101, "revision": 7},
])
async def test_create_project_missing_reference(
    client: AsyncClient, db_session: AsyncSession, submit_intake: Callable, overrides: Dict[str, Any]
):
    """
    [실패] 존재하지 않는 고객이나 메소드를 참조하면 400이며 의뢰가 생성되지 않는지 테스트합니다.
    """
    print("\n--- Running test_create_project_missing_reference ---")
    client_id = await _client_id(db_session, submit_intake)
    body = {"client_id": client_id, "num_samples": 1, "method": 202, "revision": 0, **overrides}

    response = await client.post("/api/v1/lims/projects", json=body)

    assert response.status_code == 400
    assert await _count(db_session, lims_models.Intake) == 1


@pytest.mark.asyncio
async def test_create_project_missing_fields(client: AsyncClient, seed_catalog: Dict[str, Any]):
    """
    [실패/유효성] 필수 필드가 없으면 400을 반환하는지 테스트합니다.
    """
    print("\n--- Running test_create_project_missing_fields ---")
    response = await client.post("/api/v1/lims/projects", json={"num_samples": 1, "method": 202})

    assert response.status_code == 400
    assert "client_id" in response.json()["detail"]


# =============================================================================
# 3. 분석 메타데이터 필드 그룹 테스트
# =============================================================================
@pytest.mark.asyncio
async def test_set_received_creates_metadata_then_chemist_keeps_it(
    client: AsyncClient, submit_intake: Callable, seed_catalog: Dict[str, Any]
):
    """
    [성공] 메타데이터가 없을 때 접수 정보가 기본값과 함께 생성되고,
    이후 담당자 배정이 접수 필드를 건드리지 않는지 테스트합니다.
    """
    print("\n--- Running test_set_received_creates_metadata_then_chemist_keeps_it ---")
    report_id = await submit_intake(num_samples=2)

    response = await client.put(
        f"/api/v1/lims/projects/{report_id}/received",
        json={"date_received": "2024-01-10", "conditions_upon_arrival": "Intact", "storage_conditions": "4°C"},
    )
    print(f"Response: {response.json()}")

    assert response.status_code == 200
    data = response.json()
    assert data["report_id"] == report_id
    assert data["date_received"] == "2024-01-10"
    assert data["conditions_upon_arrival"] == "Intact"
    assert data["storage_conditions"] == "4°C"
    assert data["num_samples_analyzed"] == 2
    assert data["analysis_unit"] == "ng"

    response = await client.put(f"/api/v1/lims/projects/{report_id}/chemist", json={"chemist": "Alice Kim"})

    assert response.status_code == 200
    data = response.json()
    assert data["preparer_id"] == seed_catalog["employees"]["alice"]
    assert data["date_received"] == "2024-01-10"
    assert data["conditions_upon_arrival"] == "Intact"
    assert data["storage_conditions"] == "4°C"


@pytest.mark.asyncio
async def test_set_received_defaults_missing_conditions(client: AsyncClient, submit_intake: Callable):
    """
    [성공] 도착/보관 조건이 없으면 'Not specified'로 채워지는지 테스트합니다.
    """
    print("\n--- Running test_set_received_defaults_missing_conditions ---")
    report_id = await submit_intake()

    response = await client.put(f"/api/v1/lims/projects/{report_id}/received", json={"date_received": "2024-01-10"})

    assert response.status_code == 200
    assert response.json()["conditions_upon_arrival"] == "Not specified"
    assert response.json()["storage_conditions"] == "Not specified"


@pytest.mark.asyncio
@pytest.mark.parametrize("chemist", ["N/A", "Nobody Known"])
async def test_assign_chemist_sentinel_or_unknown_clears(
    client: AsyncClient, submit_intake: Callable, chemist: str
):
    """
    [성공] 'N/A'나 알 수 없는 이름은 오류가 아니라 배정 해제(null)로 처리되는지 테스트합니다.
    """
    print("\n--- Running test_assign_chemist_sentinel_or_unknown_clears ---")
    report_id = await submit_intake()
    await client.put(f"/api/v1/lims/projects/{report_id}/chemist", json={"chemist": "Bob Lee"})

    response = await client.put(f"/api/v1/lims/projects/{report_id}/chemist", json={"chemist": chemist})

    assert response.status_code == 200
    assert response.json()["preparer_id"] is None


@pytest.mark.asyncio
async def test_assign_reviewer(client: AsyncClient, submit_intake: Callable, seed_catalog: Dict[str, Any]):
    """
    [성공] 검토자 배정이 reviewer_id만 바꾸는지 테스트합니다.
    """
    print("\n--- Running test_assign_reviewer ---")
    report_id = await submit_intake()
    await client.put(f"/api/v1/lims/projects/{report_id}/chemist", json={"chemist": "Alice Kim"})

    response = await client.put(f"/api/v1/lims/projects/{report_id}/reviewer", json={"reviewer": "Carol Park"})

    assert response.status_code == 200
    assert response.json()["reviewer_id"] == seed_catalog["employees"]["carol"]
    assert response.json()["preparer_id"] == seed_catalog["employees"]["alice"]


@pytest.mark.asyncio
async def test_project_number_idempotent(client: AsyncClient, submit_intake: Callable):
    """
    [성공] 같은 프로젝트 번호를 두 번 적용해도 결과가 같은지 테스트합니다.
    """
    print("\n--- Running test_project_number_idempotent ---")
    report_id = await submit_intake()
    url = f"/api/v1/lims/projects/{report_id}/project-number"

    first = await client.put(url, json={"project_number": "P-2024-001"})
    second = await client.put(url, json={"project_number": "P-2024-001"})

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert second.json()["project_number"] == "P-2024-001"


@pytest.mark.asyncio
async def test_project_number_numeric_and_clear(client: AsyncClient, submit_intake: Callable):
    """
    [성공] 숫자 프로젝트 번호는 문자열로 저장되고, null을 보내면 번호가 비워지는지 테스트합니다.
    """
    print("\n--- Running test_project_number_numeric_and_clear ---")
    report_id = await submit_intake()
    url = f"/api/v1/lims/projects/{report_id}/project-number"

    numeric = await client.put(url, json={"project_number": 12345})
    assert numeric.status_code == 200
    assert numeric.json()["project_number"] == "12345"

    cleared = await client.put(url, json={"project_number": None})
    assert cleared.status_code == 200
    assert cleared.json()["project_number"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("path, body, field, expected", [
    ("due-date", {"due_date": "2024-03-01T10:00:00"}, "due_date", "2024-03-01"),
    ("due-date", {"due_date": "2024-03-01T22:00:00-05:00"}, "due_date", "2024-03-02"),
    ("reported", {"date_reported": "2024-04-02T08:15:00"}, "date_reported", "2024-04-02"),
    ("received", {"date_received": "2024-01-15T09:00:00+09:00"}, "date_received", "2024-01-15"),
    ("analysis-dates", {"extraction_date": "2024-02-01T16:30:00"}, "extraction_date", "2024-02-01"),
])
async def test_field_group_dates_accept_datetime(
    client: AsyncClient, submit_intake: Callable, path: str, body: Dict[str, Any], field: str, expected: str
):
    """
    [성공] 필드 그룹의 일자 필드가 일시 입력을 (UTC 기준) 날짜로 변환해 저장하는지 테스트합니다.
    """
    print("\n--- Running test_field_group_dates_accept_datetime ---")
    report_id = await submit_intake()

    response = await client.put(f"/api/v1/lims/projects/{report_id}/{path}", json=body)
    print(f"Response: {response.json()}")

    assert response.status_code == 200
    assert response.json()[field] == expected


@pytest.mark.asyncio
async def test_create_project_due_date_accepts_datetime(
    client: AsyncClient, db_session: AsyncSession, submit_intake: Callable
):
    """
    [성공] 프로젝트 생성 시 일시 형식의 납기일이 날짜로 저장되는지 테스트합니다.
    """
    print("\n--- Running test_create_project_due_date_accepts_datetime ---")
    client_id = await _client_id(db_session, submit_intake)
    body = {
        "client_id": client_id, "num_samples": 1, "method": 101, "revision": 0,
        "due_date": "2024-05-20T17:45:00",
    }

    response = await client.post("/api/v1/lims/projects", json=body)

    assert response.status_code == 201
    metadata = await db_session.get(lims_models.AnalysisMetadata, response.json()["report_id"])
    assert metadata.due_date == date(2024, 5, 20)


@pytest.mark.asyncio
async def test_field_groups_commute(db_session: AsyncSession, submit_intake: Callable, seed_catalog: Dict[str, Any]):
    """
    [성공] 서로 다른 필드 그룹을 어떤 순서로 적용해도 같은 상태로 수렴하는지 테스트합니다.
    """
    print("\n--- Running test_field_groups_commute ---")
    metadata_crud = lims_crud.analysis_metadata
    operations = [
        lambda rid: metadata_crud.set_project_number(
            db_session, report_id=rid, obj_in=lims_schemas.ProjectNumberUpdate(project_number="P-7")),
        lambda rid: metadata_crud.set_received(
            db_session, report_id=rid,
            obj_in=lims_schemas.ReceivedUpdate(date_received=date(2024, 1, 10), conditions_upon_arrival="Cold")),
        lambda rid: metadata_crud.assign_chemist(
            db_session, report_id=rid, obj_in=lims_schemas.ChemistAssign(chemist="Bob Lee")),
        lambda rid: metadata_crud.set_due_date(
            db_session, report_id=rid, obj_in=lims_schemas.DueDateUpdate(due_date=date(2024, 2, 1))),
    ]

    forward_id = await submit_intake()
    backward_id = await submit_intake(email="b@x.com")
    for operation in operations:
        forward = await operation(forward_id)
    for operation in reversed(operations):
        backward = await operation(backward_id)

    assert _metadata_state(forward) == _metadata_state(backward)
    assert forward.preparer_id == seed_catalog["employees"]["bob"]
    assert forward.storage_conditions == "Not specified"


@pytest.mark.asyncio
async def test_field_group_unknown_report(client: AsyncClient, db_session: AsyncSession, seed_catalog: Dict[str, Any]):
    """
    [실패] 존재하지 않는 보고서에 필드 그룹을 적용하면 404이며 메타데이터가 생성되지 않는지 테스트합니다.
    """
    print("\n--- Running test_field_group_unknown_report ---")
    for path, body in [
        ("project-number", {"project_number": "P-1"}),
        ("received", {"date_received": "2024-01-10"}),
        ("chemist", {"chemist": "Alice Kim"}),
    ]:
        response = await client.put(f"/api/v1/lims/projects/4242/{path}", json=body)
        assert response.status_code == 404, path

    assert await _count(db_session, lims_models.AnalysisMetadata) == 0


@pytest.mark.asyncio
async def test_field_group_missing_fields(client: AsyncClient, submit_intake: Callable):
    """
    [실패/유효성] 필드 그룹 본문에 필수 필드가 없으면 400을 반환하는지 테스트합니다.
    """
    print("\n--- Running test_field_group_missing_fields ---")
    report_id = await submit_intake()

    for path in ["project-number", "received", "chemist", "reviewer", "due-date", "analysis-dates", "reported"]:
        response = await client.put(f"/api/v1/lims/projects/{report_id}/{path}", json={})
        assert response.status_code == 400, path


@pytest.mark.asyncio
async def test_analysis_dates_partial_order(client: AsyncClient, submit_intake: Callable):
    """
    [성공/실패] 분석 일자는 임의 순서로 채울 수 있지만,
    추출일 <= 시작일 <= 종료일을 어기면 400이며 기존 값이 유지되는지 테스트합니다.
    """
    print("\n--- Running test_analysis_dates_partial_order ---")
    report_id = await submit_intake()
    url = f"/api/v1/lims/projects/{report_id}/analysis-dates"

    # 종료일만 먼저 기록 (시작일이 없으므로 비교하지 않음)
    response = await client.put(url, json={"analysis_end_date": "2024-02-20"})
    assert response.status_code == 200

    response = await client.put(url, json={"analysis_start_date": "2024-02-21"})
    print(f"Response: {response.json()}")
    assert response.status_code == 400
    assert "analysis_end_date" in response.json()["detail"]

    response = await client.put(url, json={"analysis_start_date": "2024-02-10"})
    assert response.status_code == 200

    response = await client.put(url, json={"extraction_date": "2024-02-11"})
    assert response.status_code == 400
    assert "extraction_date" in response.json()["detail"]

    response = await client.put(url, json={"extraction_date": "2024-02-10"})
    assert response.status_code == 200
    data = response.json()
    assert (data["extraction_date"], data["analysis_start_date"], data["analysis_end_date"]) == (
        "2024-02-10", "2024-02-10", "2024-02-20"
    )


@pytest.mark.asyncio
async def test_analysis_dates_value_object():
    """
    [성공/실패] AnalysisDates 값 객체가 비어 있는 일자는 비교하지 않는지 테스트합니다.
    """
    print("\n--- Running test_analysis_dates_value_object ---")
    lims_schemas.AnalysisDates(extraction_date=date(2024, 3, 1), analysis_end_date=date(2024, 1, 1))
    lims_schemas.AnalysisDates()

    with pytest.raises(ValueError):
        lims_schemas.AnalysisDates(extraction_date=date(2024, 3, 2), analysis_start_date=date(2024, 3, 1))


@pytest.mark.asyncio
async def test_stage_unknown_report_raises(db_session: AsyncSession, seed_catalog: Dict[str, Any]):
    """
    [실패] CRUD 계층에서도 존재하지 않는 보고서는 NotFoundError를 발생시키는지 테스트합니다.
    """
    print("\n--- Running test_stage_unknown_report_raises ---")
    with pytest.raises(NotFoundError):
        await lims_crud.analysis_metadata.apply_field_group(db_session, report_id=777, values={"project_number": "X"})

from staff_eval.models.company import Company
from staff_eval.models.evaluation import Evaluation, EvaluatorResponse
from staff_eval.models.user import User, UserRole


def _url(company, staff, year, month):
    return f"/api/companies/{company.id}/staff/{staff.id}/evaluations/{year}/{month}"


def _body(admin, form, status=None):
    body = {"evaluator_id": admin.id, "form": form}
    if status:
        body["status"] = status
    return body


def _second_admin(db_session, company):
    admin = User(
        company_id=company.id,
        email="yuki@alphacorp.example",
        full_name="Yuki Mori",
        role=UserRole.ADMIN,
    )
    db_session.add(admin)
    db_session.commit()
    return admin


def test_preview_scores_form(client, company, evaluation_form):
    response = client.post(f"/api/companies/{company.id}/evaluations/preview", json=evaluation_form())
    assert response.status_code == 200
    data = response.json()
    assert data["is_valid"] is True
    assert data["scores"]["total_score"] == 83
    assert data["rank"]["rank"] == "A"
    assert data["rank"]["reward_display"] == "+¥3,000"


def test_preview_reports_out_of_range_items(client, company, evaluation_form):
    response = client.post(
        f"/api/companies/{company.id}/evaluations/preview",
        json=evaluation_form(appearance=4)
    )
    data = response.json()
    assert data["is_valid"] is False
    assert data["rank"] is None
    assert data["errors"] == ["アピアランス評価は0〜3点の範囲で入力してください"]


def test_save_evaluation(client, company, staff_user, admin_user, evaluation_form):
    response = client.put(
        _url(company, staff_user, 2020, 7),
        json=_body(admin_user, evaluation_form(), "completed")
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total_score"] == 83
    assert data["total_score_display"] == "83.0点"
    assert data["performance_score"] == 40
    assert data["rank"] == "A"
    assert data["reward"] == 3000
    assert data["status"] == "completed"
    assert data["status_label"] == "完了"
    assert [r["evaluator_id"] for r in data["responses"]] == [admin_user.id]
    assert data["responses"][0]["submitted_at"] is not None


def test_same_admin_replaces_their_response(client, db_session, company, staff_user, admin_user, evaluation_form):
    client.put(_url(company, staff_user, 2020, 7), json=_body(admin_user, evaluation_form()))
    response = client.put(
        _url(company, staff_user, 2020, 7),
        json=_body(admin_user, evaluation_form(achievement=25, client=15), "completed")
    )
    assert response.json()["total_score"] == 91
    assert response.json()["rank"] == "S"
    assert db_session.query(Evaluation).filter(Evaluation.staff_id == staff_user.id).count() == 1
    assert db_session.query(EvaluatorResponse).count() == 1


def test_responses_from_several_admins_are_averaged(client, db_session, company, staff_user, admin_user, evaluation_form):
    other_admin = _second_admin(db_session, company)

    client.put(_url(company, staff_user, 2020, 7), json=_body(admin_user, evaluation_form()))
    response = client.put(
        _url(company, staff_user, 2020, 7),
        json=_body(other_admin, evaluation_form(achievement=25, client=15, initiative=10), "completed")
    )
    assert response.status_code == 200
    data = response.json()
    # (83 + 93) / 2
    assert data["total_score"] == 88
    assert data["performance_score"] == 44
    assert data["behavior_score"] == 26
    assert data["rank"] == "A+"
    assert data["reward"] == 4000
    assert sorted(r["total_score"] for r in data["responses"]) == [83, 93]
    assert db_session.query(Evaluation).filter(Evaluation.staff_id == staff_user.id).count() == 1


def test_uneven_average_keeps_two_decimals(client, db_session, company, staff_user, admin_user, evaluation_form):
    other_admin = _second_admin(db_session, company)
    client.put(_url(company, staff_user, 2020, 7), json=_body(admin_user, evaluation_form()))
    response = client.put(_url(company, staff_user, 2020, 7), json=_body(other_admin, evaluation_form(appearance=2)))
    assert response.json()["total_score"] == 82.5
    assert response.json()["rank"] == "A"


def test_admin_cannot_be_evaluated(client, company, admin_user, evaluation_form):
    response = client.put(_url(company, admin_user, 2020, 7), json=_body(admin_user, evaluation_form()))
    assert response.status_code == 422
    error = response.json()["errors"][0]
    assert error["code"] == "NOT_STAFF_MEMBER"
    assert error["details"]["user_id"] == admin_user.id


def test_staff_cannot_submit_evaluations(client, db_session, company, staff_user, evaluation_form):
    colleague = User(company_id=company.id, email="jiro@alphacorp.example", full_name="Jiro Ito")
    db_session.add(colleague)
    db_session.commit()

    response = client.put(_url(company, staff_user, 2020, 7), json=_body(colleague, evaluation_form()))
    assert response.status_code == 403
    assert response.json()["errors"][0]["code"] == "PERMISSION_DENIED"
    assert db_session.query(Evaluation).count() == 0


def test_evaluator_from_other_company_is_hidden(client, db_session, company, staff_user, evaluation_form):
    other = Company(name="Other Inc")
    db_session.add(other)
    db_session.commit()
    outsider = User(company_id=other.id, email="boss@other.example", full_name="Outside Boss", role=UserRole.ADMIN)
    db_session.add(outsider)
    db_session.commit()

    response = client.put(_url(company, staff_user, 2020, 7), json=_body(outsider, evaluation_form()))
    assert response.status_code == 404


def test_evaluator_is_required(client, company, staff_user, evaluation_form):
    response = client.put(_url(company, staff_user, 2020, 7), json={"form": evaluation_form()})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "evaluator_id"


def test_save_invalid_evaluation(client, company, staff_user, admin_user, evaluation_form):
    response = client.put(_url(company, staff_user, 2020, 7), json=_body(admin_user, evaluation_form(initiative=11)))
    assert response.status_code == 422
    error = response.json()["errors"][0]
    assert error["code"] == "EVALUATION_INVALID"
    assert error["details"]["errors"] == ["主体性評価は0〜10点の範囲で入力してください"]


def test_save_evaluation_before_founding(client, company, staff_user, admin_user, evaluation_form):
    response = client.put(_url(company, staff_user, 2020, 3), json=_body(admin_user, evaluation_form()))
    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "PRE_FOUNDING_DATE"


def test_save_evaluation_rejects_bad_month(client, company, staff_user, admin_user, evaluation_form):
    response = client.put(_url(company, staff_user, 2020, 13), json=_body(admin_user, evaluation_form()))
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "month"


def test_staff_from_other_company_is_hidden(client, db_session, staff_user, admin_user, evaluation_form):
    other = Company(name="Other Inc")
    db_session.add(other)
    db_session.commit()

    response = client.put(_url(other, staff_user, 2020, 7), json=_body(admin_user, evaluation_form()))
    assert response.status_code == 404


def test_list_evaluations_newest_first(client, company, staff_user, admin_user, evaluation_form):
    for month in (5, 7, 6):
        client.put(_url(company, staff_user, 2020, month), json=_body(admin_user, evaluation_form()))

    response = client.get(f"/api/companies/{company.id}/staff/{staff_user.id}/evaluations")
    assert [e["evaluation_month"] for e in response.json()] == [7, 6, 5]
    assert response.json()[0]["status_label"] == "下書き"


def test_period_report(client, company, staff_user, admin_user, evaluation_form):
    client.put(_url(company, staff_user, 2020, 4), json=_body(admin_user, evaluation_form(), "completed"))
    client.put(_url(company, staff_user, 2020, 7), json=_body(admin_user, evaluation_form(), "completed"))
    client.put(_url(company, staff_user, 2020, 8), json=_body(admin_user, evaluation_form(achievement=0)))
    client.put(_url(company, staff_user, 2021, 4), json=_body(admin_user, evaluation_form(), "completed"))

    response = client.get(f"/api/companies/{company.id}/staff/{staff_user.id}/reports/1")
    assert response.status_code == 200
    report = response.json()
    assert report["period"]["period_name"] == "第1期"
    assert report["evaluation_count"] == 2
    assert report["average_score"] == 83
    assert report["average_score_display"] == "83.0点"
    assert report["rank"] == "A"
    assert report["reward"] == 3000
    assert report["reward_display"] == "+¥3,000"
    assert [q["evaluation_count"] for q in report["quarters"]] == [1, 1, 0, 0]
    assert report["quarters"][1]["category_averages"]["behavior"] == 25


def test_period_report_uses_monthly_averages(client, db_session, company, staff_user, admin_user, evaluation_form):
    other_admin = _second_admin(db_session, company)
    client.put(_url(company, staff_user, 2020, 4), json=_body(admin_user, evaluation_form(), "completed"))
    client.put(_url(company, staff_user, 2020, 4), json=_body(other_admin, evaluation_form(achievement=25, client=15), "completed"))
    client.put(_url(company, staff_user, 2020, 5), json=_body(admin_user, evaluation_form(), "completed"))

    report = client.get(f"/api/companies/{company.id}/staff/{staff_user.id}/reports/1").json()
    # April averages 87 across two admins, May is 83
    assert report["evaluation_count"] == 2
    assert report["average_score"] == 85
    assert report["rank"] == "A+"

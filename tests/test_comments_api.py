from staff_eval.models.evaluation import Evaluation, EvaluationStatus


def _comments_url(company, staff):
    return f"/api/companies/{company.id}/staff/{staff.id}/comments"


def _comment(client, company, staff, admin, evaluation, text):
    return client.post(
        _comments_url(company, staff),
        json={"evaluation_id": evaluation.id, "admin_id": admin.id, "comment": text}
    )


def test_admin_adds_comment(client, company, staff_user, admin_user, evaluation):
    response = _comment(client, company, staff_user, admin_user, evaluation, "Great client feedback this month.")
    assert response.status_code == 201
    data = response.json()
    assert data["evaluation_id"] == evaluation.id
    assert data["evaluation_label"] == "2020年7月"
    assert data["admin_name"] == "Kenji Tanaka"
    assert data["comment"] == "Great client feedback this month."


def test_staff_cannot_comment(client, company, staff_user, evaluation):
    response = _comment(client, company, staff_user, staff_user, evaluation, "Self review")
    assert response.status_code == 403


def test_comment_must_target_the_staff_members_evaluation(client, db_session, company, staff_user, admin_user, evaluation):
    from staff_eval.models.user import User
    colleague = User(company_id=company.id, email="jiro@alphacorp.example", full_name="Jiro Ito")
    db_session.add(colleague)
    db_session.commit()

    response = _comment(client, company, colleague, admin_user, evaluation, "Wrong person")
    assert response.status_code == 404


def test_comments_filtered_by_fiscal_period(client, db_session, company, staff_user, admin_user, evaluation):
    # Period 2 of an April-founded company starts in April 2021
    next_period = Evaluation(
        company_id=company.id,
        staff_id=staff_user.id,
        evaluation_year=2021,
        evaluation_month=4,
        status=EvaluationStatus.COMPLETED,
        total_score=90,
        rank="S",
    )
    db_session.add(next_period)
    db_session.commit()

    first = _comment(client, company, staff_user, admin_user, evaluation, "Period one").json()
    second = _comment(client, company, staff_user, admin_user, next_period, "Period two").json()

    everything = client.get(_comments_url(company, staff_user)).json()
    assert [c["id"] for c in everything] == [second["id"], first["id"]]

    period_one = client.get(_comments_url(company, staff_user), params={"period_number": 1}).json()
    assert [c["comment"] for c in period_one] == ["Period one"]

    period_two = client.get(_comments_url(company, staff_user), params={"period_number": 2}).json()
    assert [c["evaluation_label"] for c in period_two] == ["2021年4月"]


def test_period_filter_needs_establishment_date(client, db_session, staff_user):
    from staff_eval.models.company import Company
    company = Company(name="Beta LLC")
    db_session.add(company)
    db_session.commit()
    staff_user.company_id = company.id
    db_session.commit()

    response = client.get(_comments_url(company, staff_user), params={"period_number": 1})
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "ESTABLISHMENT_DATE_MISSING"

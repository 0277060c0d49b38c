"""
Seed a demo company with staff and a few months of completed evaluations.

Usage: python scripts/seed_demo.py
"""
from datetime import date

from staff_eval.database import SessionLocal, init_db
from staff_eval.models.company import Company
from staff_eval.models.evaluation import EvaluationStatus
from staff_eval.models.user import User, UserRole
from staff_eval.schemas.evaluation import EvaluationFormData, EvaluationUpsert
from staff_eval.services.evaluation_service import upsert_evaluation

init_db()
db = SessionLocal()

def get_or_create_company(name, establishment_date):
    company = db.query(Company).filter(Company.name == name).first()
    if company:
        print(f"Company {name} already exists. Skipping.")
        return company
    company = Company(name=name, establishment_date=establishment_date)
    db.add(company)
    db.commit()
    db.refresh(company)
    print(f"Created company -> {name} (founded {establishment_date.isoformat()})")
    return company

def create_user(company, email, full_name, role):
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        print(f"User {email} already exists. Skipping.")
        return existing_user

    user = User(company_id=company.id, email=email, full_name=full_name, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    print(f"Created {role.value} -> {email}")
    return user

company = get_or_create_company("Demo Corp", date(2020, 4, 1))
admin = create_user(company, "admin@demo.example", "Demo Admin", UserRole.ADMIN)
staff = create_user(company, "staff@demo.example", "Demo Staff", UserRole.STAFF)

for month, achievement in [(4, 18), (5, 22), (6, 25)]:
    form = EvaluationFormData(
        performance={"achievement": achievement, "attendance": 5, "compliance": 3, "client": 12},
        behavior={"initiative": 8, "responsibility": 6, "cooperation": 8, "appearance": 3},
        growth={"self_improvement": 6, "response": 4, "goal_achievement": 8},
    )
    evaluation = upsert_evaluation(
        db, company, staff, admin, 2024, month,
        EvaluationUpsert(evaluator_id=admin.id, form=form, status=EvaluationStatus.COMPLETED)
    )
    print(f"Evaluation 2024-{month:02d}: {evaluation.total_score} ({evaluation.rank})")

db.close()

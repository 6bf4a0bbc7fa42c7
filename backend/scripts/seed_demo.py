# backend/scripts/seed_demo.py
from __future__ import annotations

import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.orm import sessionmaker

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from backoffice.core.countries import Country
from backoffice.core.settings import settings
from backoffice.models import (
    Absence,
    Alert,
    Ami,
    BankTransaction,
    Bonus,
    Dao,
    Devis,
    Employee,
    Garage,
    Invoice,
    Vehicle,
    VehicleExpense,
    VehicleIntervention,
)


# ---- Données de démo (pays d’exploitation) ----
DEVISE = {
    Country.CAMEROON: "XAF",
    Country.IVORY_COAST: "XOF",
    Country.BENIN: "XOF",
    Country.TOGO: "XOF",
    Country.GHANA: "GHS",
    Country.ITALIE: "EUR",
    Country.ROMANIE: "RON",
}

CITIES = {
    Country.CAMEROON: ["Douala", "Yaoundé"],
    Country.IVORY_COAST: ["Abidjan", "Yamoussoukro"],
    Country.BENIN: ["Cotonou"],
    Country.TOGO: ["Lomé"],
    Country.GHANA: ["Accra"],
    Country.ITALIE: ["Milano", "Roma"],
    Country.ROMANIE: ["București"],
}

BRANDS = [("Toyota", "Hilux"), ("Toyota", "Land Cruiser"), ("Peugeot", "308"), ("Renault", "Duster"), ("Isuzu", "D-Max")]
FIRST_NAMES = ["Aminata", "Jean", "Koffi", "Marie", "Paul", "Fatou", "Luca", "Ioana", "Kwame", "Awa"]
LAST_NAMES = ["Traoré", "Mbarga", "Kouassi", "Rossi", "Popescu", "Mensah", "Diallo", "Ngono", "Adjovi", "Agbeko"]

# Inserteridentity des écritures du script
INSERTER = "seed-demo"


def demo_plate(country: Country, i: int) -> str:
    return f"{country.value[:2]}-{1000 + i}-{random.choice('ABCDEFGH')}{random.choice('JKLMNPRS')}"


def random_day(days: int) -> date:
    return date.today() - timedelta(days=random.randint(0, days))


def reset_all(db) -> None:
    # ordre inverse des FK
    for model in (
        Alert,
        Absence,
        Bonus,
        VehicleIntervention,
        VehicleExpense,
        Vehicle,
        Garage,
        Employee,
        BankTransaction,
        Invoice,
        Dao,
        Devis,
        Ami,
    ):
        db.execute(delete(model))
    db.commit()
    print("✅ Reset done (all demo data deleted).")


def seed_country(db, country: Country, n_vehicles: int, n_employees: int, days: int) -> dict[str, int]:
    tags = {"inserter_identity": INSERTER, "inserter_country": country.value}
    devise = DEVISE[country]
    counts = {"vehicles": 0, "expenses": 0, "interventions": 0, "employees": 0, "alerts": 0}

    garages = [
        Garage(name=f"Garage {city}", address=f"Zone industrielle, {city}", phone="+000 000 000", **tags)
        for city in CITIES[country]
    ]
    db.add_all(garages)
    db.flush()

    for i in range(n_vehicles):
        brand, model = random.choice(BRANDS)
        v = Vehicle(
            license_plate=demo_plate(country, i),
            brand=brand,
            model=model,
            vehicle_type=random.choice(["CAR", "TRUCK", "VAN"]),
            fuel_type=random.choice(["DIESEL", "GASOLINE", "HYBRID"]),
            year=random.randint(2012, 2025),
            mileage=random.randint(5_000, 250_000),
            status=random.choice(["AVAILABLE", "AVAILABLE", "IN_USE", "UNDER_MAINTENANCE"]),
            devise=devise,
            **tags,
        )
        db.add(v)
        db.flush()  # récupère v.id
        counts["vehicles"] += 1

        for _ in range(random.randint(1, 4)):
            db.add(
                VehicleExpense(
                    vehicle_id=v.id,
                    expense_date=random_day(days),
                    code=random.choice(["FUEL", "TOLL", "MAINTENANCE", "PARKING"]),
                    description="Dépense de démonstration",
                    distance=random.randint(0, 800),
                    amount=round(random.uniform(5_000, 150_000), 2),
                    devise=devise,
                    statut=random.choice(["PENDING", "VALIDATED", "PAID"]),
                    **tags,
                )
            )
            counts["expenses"] += 1

        if random.random() < 0.5:
            db.add(
                VehicleIntervention(
                    vehicle_id=v.id,
                    garage_id=random.choice(garages).id,
                    intervention_date=random_day(days),
                    intervention_type=random.choice(["PREVENTIVE", "CORRECTIVE", "INSPECTION"]),
                    description="Révision périodique",
                    cost=round(random.uniform(20_000, 400_000), 2),
                    technician=random.choice(FIRST_NAMES),
                    devise=devise,
                    status=random.choice(["SCHEDULED", "IN_PROGRESS", "COMPLETED"]),
                    **tags,
                )
            )
            counts["interventions"] += 1

    for i in range(n_employees):
        first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
        e = Employee(
            employee_number=f"{country.value[:3]}-{i + 1:04d}",
            first_name=first,
            last_name=last,
            email=f"{first.lower()}.{last.lower()}.{country.value.lower()}.{i}@example.com",
            role=random.choice(["EMPLOYEE", "EMPLOYEE", "SECRETARY", "ACCOUNTANT"]),
            status="ACTIVE",
            department=random.choice(["Logistique", "Finance", "Technique", "RH"]),
            work_country=country.value,
            hire_date=random_day(days * 10),
            **tags,
        )
        db.add(e)
        db.flush()
        counts["employees"] += 1

        if random.random() < 0.3:
            start = random_day(days)
            db.add(
                Absence(
                    user_id=e.id,
                    absence_type=random.choice(["SICK_LEAVE", "ANNUAL_LEAVE", "TRAINING"]),
                    start_date=start,
                    end_date=start + timedelta(days=random.randint(1, 10)),
                    **tags,
                )
            )
        if random.random() < 0.2:
            db.add(
                Bonus(
                    user_id=e.id,
                    bonus_type="PERFORMANCE",
                    amount=round(random.uniform(10_000, 200_000), 2),
                    currency=devise,
                    award_date=random_day(days),
                    payment_method="BANK_TRANSFER",
                    **tags,
                )
            )
        if random.random() < 0.15:
            db.add(
                Alert(
                    title=f"Fin de période d’essai : {first} {last}",
                    due_date=date.today() + timedelta(days=random.randint(1, 60)),
                    priority=random.choice(["HIGH", "MEDIUM", "LOW"]),
                    alert_type="CONTRACT",
                    user_id=e.id,
                    **tags,
                )
            )
            counts["alerts"] += 1

    db.add(
        BankTransaction(
            bank_id=1,
            name="Virement fournisseur",
            transaction_date=random_day(days),
            amount=round(random.uniform(100_000, 5_000_000), 2),
            devise=devise,
            account_type="CHECKING_ACCOUNT",
            account_number=f"{country.value[:2]}00-{random.randint(10**7, 10**8 - 1)}",
            **tags,
        )
    )
    db.add(
        Invoice(
            invoice_number=f"FAC-{country.value[:3]}-{random.randint(100, 999)}",
            supplier="Fournisseur démo",
            service_type=random.choice(["ELECTRICITY", "WATER", "INTERNET"]),
            amount=round(random.uniform(20_000, 500_000), 2),
            devise=devise,
            issue_date=random_day(days),
            **tags,
        )
    )
    db.add(
        Dao(
            dao_number=f"DAO-{country.value[:3]}-{random.randint(1, 99):02d}",
            client_name="Ministère des Travaux Publics",
            transmission_date=random_day(days),
            submission_type=random.choice(["ELECTRONIC", "PHYSICAL"]),
            status=random.choice(["APPLICATION", "UNDER_REVIEW", "PENDING"]),
            devise=devise,
            object="Entretien du réseau routier",
            **tags,
        )
    )
    db.add(
        Devis(
            index_number=f"DEV-{country.value[:3]}-{random.randint(1, 999):03d}",
            client_name="Société Minière",
            amount=round(random.uniform(1_000_000, 50_000_000), 2),
            validity_date=date.today() + timedelta(days=30),
            devise=devise,
            **tags,
        )
    )
    db.add(
        Ami(
            name="AMI études techniques",
            client="Agence de développement",
            deposit_date=random_day(days),
            object="Manifestation d’intérêt études",
            **tags,
        )
    )

    return counts


def seed(reset: bool, countries: list[Country], n_vehicles: int, n_employees: int, days: int) -> None:
    engine = create_engine(settings.DATABASE_URL_SYNC, future=True)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    with SessionLocal() as db:
        if reset:
            reset_all(db)

        for country in countries:
            counts = seed_country(db, country, n_vehicles, n_employees, days)
            db.commit()
            print(f"… {country.value}: " + ", ".join(f"{k}={v}" for k, v in counts.items()))

        # petit résumé
        total_vehicles = db.execute(select(func.count()).select_from(Vehicle)).scalar_one()
        total_employees = db.execute(select(func.count()).select_from(Employee)).scalar_one()
        print("✅ Seed terminé.")
        print(f"   - Véhicules en base: {total_vehicles}")
        print(f"   - Employés en base: {total_employees}")


def main():
    parser = argparse.ArgumentParser(description="Jeu de données de démo du back-office")
    parser.add_argument("--reset", action="store_true", help="Supprime les données demo avant de reseed")
    parser.add_argument(
        "--country",
        action="append",
        choices=[c.value for c in Country],
        help="Pays à peupler (répétable). Défaut : tous.",
    )
    parser.add_argument("--vehicles", type=int, default=8, help="Véhicules par pays")
    parser.add_argument("--employees", type=int, default=15, help="Employés par pays")
    parser.add_argument("--days", type=int, default=90, help="Fenêtre de dates (derniers N jours)")
    parser.add_argument("--seed", type=int, default=42, help="Seed RNG pour reproductibilité")
    args = parser.parse_args()

    random.seed(args.seed)
    countries = [Country(c) for c in args.country] if args.country else list(Country)
    seed(reset=args.reset, countries=countries, n_vehicles=args.vehicles, n_employees=args.employees, days=args.days)


if __name__ == "__main__":
    main()

"""
Generate roster workbooks for regression tests.
Run this script to write the fixture files next to it.
"""
from pathlib import Path

from openpyxl import Workbook

FIXTURES_DIR = Path(__file__).parent


def create_monthly_roster_fixture(output_dir: Path = FIXTURES_DIR) -> Path:
    """
    Two monthly sheets laid out the way payroll offices send them:
    - a merged title row and a blank spacer above the table
    - a "Nombre de jours" column (matches both name and day count)
    - a totals line below the blank row that ends the table
    - an Arabic registration header on the second sheet
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Janvier 2024"

    ws["A1"] = "LISTE DU PERSONNEL - JANVIER 2024"
    ws.merge_cells("A1:F1")
    ws.append([])
    ws.append(["N°", "N° Immatriculation", "Nom", "Prénom", "Nombre de jours", "Situation"])
    ws.append([1, 1001, "Benali", "Ahmed", 22, "Actif"])
    ws.append([2, 1002, "Haddad", "Sara", 18, "Congé"])
    ws.append([3, 1003, "Meziane", "Yacine", 21, "Actif"])
    ws.append([])
    ws.append(["Total", None, None, None, 61, None])

    ws2 = wb.create_sheet("Février 2024")
    ws2.append(["رقم", "Nom et Prénom", "Jours", "Situation"])
    ws2.append([2001, "Karim Ziani", 20, "Congé"])
    ws2.append([2002, "Lina Saadi", 19, "Actif"])

    wb.create_sheet("Notes")

    output_path = Path(output_dir) / "monthly_rosters.xlsx"
    wb.save(output_path)
    print(f"Created: {output_path}")
    return output_path


def create_all_fixtures():
    create_monthly_roster_fixture()
    print("All fixtures created successfully.")


if __name__ == "__main__":
    create_all_fixtures()

"""
Script para popular o banco de dados com uma topologia de demonstração:
- Filas A, B e C
- Cada fila: 3 prateleiras (1, 2, 3)
- Cada prateleira: 3 níveis (High, Mid, Low) × 3 posições = 9 posições
- Total: 9 prateleiras × 9 posições = 81 posições
"""
from sqlalchemy.orm import Session
from models.database import SessionLocal, engine, Base
from models.shelf import Shelf
from services.codecs import row_to_letter
from services.shelf_service import ShelfService

ROWS = 3
SHELVES_PER_ROW = 3
COLORS = ["#3b82f6", "#10b981", "#f59e0b"]


def seed_database():
    """Popula o banco com as prateleiras de demonstração"""
    # Criar todas as tabelas
    Base.metadata.create_all(bind=engine)

    db: Session = SessionLocal()
    try:
        # Verificar se já existe dados
        if db.query(Shelf).count() > 0:
            print("Banco já possui dados. Use --force para recriar.")
            return

        created = []
        for row_index in range(1, ROWS + 1):
            row = row_to_letter(row_index)
            for number in range(1, SHELVES_PER_ROW + 1):
                shelf = ShelfService.create_shelf(
                    db,
                    name=f"Prateleira {row}{number}",
                    row=row,
                    number=number,
                    color=COLORS[(row_index - 1) % len(COLORS)]
                )
                created.append(shelf)

        total_positions = sum(len(s.positions) for s in created)
        print(f"✅ Seed concluído!")
        print(f"   - {ROWS} filas")
        print(f"   - {len(created)} prateleiras criadas")
        print(f"   - {total_positions} posições criadas")

    except Exception as e:
        db.rollback()
        print(f"❌ Erro ao fazer seed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    import sys
    if "--force" in sys.argv:
        # Deletar tudo e recriar
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        print("⚠️  Banco recriado do zero")

    seed_database()

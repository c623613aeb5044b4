"""
Aplicação principal FastAPI para inventário de materiais em prateleiras
"""
from fastapi import FastAPI, Request, Depends
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import Environment, FileSystemLoader, select_autoescape
from sqlalchemy.orm import Session
from pathlib import Path
import logging
import os
from dotenv import load_dotenv
from models.database import get_db, Base, engine
from routers import shelves_router, materials_router, inspections_router, stats_router, users_router
from services.errors import InventoryError
from services.shelf_service import ShelfService
from services.stats_service import StatsService
from services.upload_service import UPLOAD_DIR, UPLOAD_URL_PREFIX

load_dotenv()

logger = logging.getLogger("inventory")

# Configurar templates Jinja2
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
template_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"])
)


def render_template(template_name: str, context: dict):
    """Renderiza um template Jinja2 e retorna HTMLResponse"""
    template = template_env.get_template(template_name)
    html_content = template.render(**context)
    return HTMLResponse(content=html_content)


# Criar diretórios storage e uploads se não existirem
os.makedirs("storage", exist_ok=True)
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)

# Criar app FastAPI
app = FastAPI(title="Inventário de Materiais", description="Prateleiras, posições, materiais e inspeções")

app.include_router(shelves_router)
app.include_router(materials_router)
app.include_router(inspections_router)
app.include_router(stats_router)
app.include_router(users_router)

app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    """Converte erros do motor em {"error": mensagem}"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.on_event("startup")
async def startup_event():
    """Inicializar banco de dados e logging na startup"""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))


@app.get("/", response_class=HTMLResponse)
async def dashboard(request: Request, db: Session = Depends(get_db)):
    """Dashboard principal"""
    return render_template("index.html", {
        "request": request,
        "stats": StatsService.get_stats(db),
        "shelves": ShelfService.list_shelves(db)
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "0") in ("1", "true", "True")
    )

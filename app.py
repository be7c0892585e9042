"""
FastAPI Application Entry Point - Editor de Grafos Web API

Este módulo define la aplicación principal FastAPI que expone la carga de
grafos, los algoritmos de layout y las centralidades a través de una API
REST local.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from src.core.errors import GraphError
from src.utils.logger import get_logger

# Routers
from api.routers import graph, layout, centrality
from api.session import get_session

logger = get_logger(__name__)

# Crear instancia FastAPI
app = FastAPI(
    title="Editor de Grafos API",
    description="API REST para cargar, distribuir y colorear grafos",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS para desarrollo local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(graph.router, prefix="/api", tags=["Grafo"])
app.include_router(layout.router, prefix="/api", tags=["Layout"])
app.include_router(centrality.router, prefix="/api", tags=["Centralidad"])


@app.exception_handler(GraphError)
async def graph_error_handler(request: Request, exc: GraphError):
    """Errores de dominio no capturados por los routers."""
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc), "kind": exc.kind})


@app.get("/")
async def root():
    """Endpoint raíz - información de la API."""
    return {
        "message": "Editor de Grafos API",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.on_event("startup")
async def startup_event():
    """Evento de inicio - inicializar recursos."""
    get_session()
    logger.info("Iniciando Editor de Grafos API v1.0.0")
    logger.info("Documentación disponible en: http://localhost:8000/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre - detener ticks periódicos."""
    get_session().stop()
    logger.info("Cerrando Editor de Grafos API")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )

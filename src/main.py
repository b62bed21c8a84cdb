# main.py
"""
Ponto de entrada da API.

Execute com:
    python src/main.py

Ou com uvicorn (a partir da raiz do projeto):
    uvicorn main:app --app-dir src --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from infrastructure.settings import API_HOST, API_PORT, CORS_ORIGINS, LOG_LEVEL
from infrastructure.logging_config import configure_logging
from infrastructure.error_handling import register_exception_handlers
from application.controllers.autentication_controller import router as auth_router
from application.controllers.user_controller import router as user_router
from application.controllers import employee_controller, department_controller

configure_logging(LOG_LEVEL)

app = FastAPI(title="API Futuro do Trabalho", version="2.0.0")

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(employee_controller.router_v1)
app.include_router(employee_controller.router_v2)
app.include_router(department_controller.router_v1)
app.include_router(department_controller.router_v2)

@app.get("/health")
def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT)

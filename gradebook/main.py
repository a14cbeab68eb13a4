import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gradebook.api import analysis, attendance, classes, curriculum, grades, students
from gradebook.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Gradebook")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(classes.router, prefix="/api/classes", tags=["classes"])
app.include_router(students.router, prefix="/api/students", tags=["students"])
app.include_router(grades.router, prefix="/api/grades", tags=["grades"])
app.include_router(attendance.router, prefix="/api/attendance", tags=["attendance"])
app.include_router(curriculum.router, prefix="/api/curriculum", tags=["curriculum"])
app.include_router(analysis.router, prefix="/api/analysis", tags=["analysis"])

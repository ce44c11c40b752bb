# models/perfil.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Perfil:
    nombre_completo: str
    email: str
    descripcion: str
    habilidades: list[str] = field(default_factory=list)


PERFIL = Perfil(
    nombre_completo="Francis Daniel Mamani Silva",
    email="francisdani143@gmail.com",
    descripcion=(
        "Desarrollador Full Stack con experiencia en aplicaciones de escritorio y móviles. "
        "Me especializo en interfaces eficientes, arquitecturas limpias (MVC) "
        "y consumo de APIs REST, con foco en código mantenible y orientado a resultados."
    ),
    habilidades=[
        "Python",
        "PyQt5",
        "SQLAlchemy",
        "Arquitectura MVC",
        "Git",
        "RESTful APIs",
        "Diseño UI/UX",
        "Pruebas Unitarias",
        "Optimización de Rendimiento",
        "Control de Versiones",
    ],
)

"""
Recetario Seed Script

Fills the database with a demo catalog and two demo accounts:

- admin@recetario.com, author of every seeded recipe
- historico@recetario.com, with plans for the last 5 days

Both accounts use the password ``contraseña``. Existing recipes and the two
demo accounts are removed first, so the script can be re-run.

Usage:
    python scripts/seed.py
"""
import sys
from datetime import timedelta
from pathlib import Path
import logging
import random

from sqlalchemy import delete, select

# Add backend to path
backend_root = Path(__file__).parent.parent
sys.path.insert(0, str(backend_root))

from recetario.database import get_session_factory, init_db  # noqa: E402
from recetario.models import Recipe, User  # noqa: E402
from recetario.schemas.user import RegisterRequest  # noqa: E402
from recetario.services import planner as planner_service  # noqa: E402
from recetario.services import recipes as recipes_service  # noqa: E402
from recetario.services import users as users_service  # noqa: E402
from recetario.utils.dates import utc_today  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_PASSWORD = "contraseña"
HISTORY_DAYS = 5

ADMIN_USER = {
    "email": "admin@recetario.com",
    "name": "Admin Recetario",
    "calorie_goal": 2000,
    "phone": "123-456-7890",
    "address": "Calle Falsa 123",
    "id_number": "000000000",
}

HISTORY_USER = {
    "email": "historico@recetario.com",
    "name": "Usuario Histórico",
    "calorie_goal": 2200,
    "phone": "987-654-3210",
    "address": "Avenida Siempreviva 742",
    "id_number": "111111111",
}

# Images are file names; the frontend resolves them
MOCK_RECIPES = [
    {
        "title": "Ensalada de pollo y vegetales",
        "description": "Receta ligera y saludable de pollo con vegetales frescos.",
        "kcal": 350,
        "time": "20 min",
        "level": "Fácil",
        "ingredients": ["pollo", "lechuga", "tomate", "pepino"],
        "steps": [
            "Cocina 1 pechuga de pollo a la plancha a fuego medio durante 6-8 minutos por cada lado y córtala en tiras",
            "Lava y trocea 2 tazas de lechuga, 1 tomate y 1/2 pepino",
            "Mezcla todos los ingredientes en un bol grande",
            "Añade 1 cucharada de aceite de oliva, una pizca de sal y el jugo de medio limón al gusto",
        ],
        "image": "EnsaladadePollo.jpg",
    },
    {
        "title": "Tortilla de espinacas",
        "description": "Ideal para desayunar o una cena ligera con huevo y espinacas.",
        "kcal": 250,
        "time": "15 min",
        "level": "Fácil",
        "ingredients": ["huevo", "espinaca", "cebolla"],
        "steps": [
            "Bate 2 huevos en un bol con una pizca de sal y pimienta",
            "Saltea 1 taza de espinaca y 1/4 de cebolla picada durante 2 minutos",
            "Añade los huevos batidos y cocina a fuego medio durante 3-4 minutos hasta que cuaje",
            "Voltea la tortilla con cuidado y cocina 1 minuto más antes de servir",
        ],
        "image": "TortilladeEspinaca.jpg",
    },
    {
        "title": "Sopa de lentejas",
        "description": "Sopa reconfortante con lentejas y verduras, económica y nutritiva.",
        "kcal": 300,
        "time": "40 min",
        "level": "Media",
        "ingredients": ["lentejas", "zanahoria", "papa", "cebolla"],
        "steps": [
            "Enjuaga 1 taza de lentejas y ponlas a cocer en 4 tazas de agua",
            "Añade 1 zanahoria picada, 1 papa en cubos y 1/2 cebolla picada",
            "Deja hervir a fuego medio durante 30 minutos o hasta que las lentejas estén tiernas",
            "Ajusta la sal al gusto y sirve caliente",
        ],
        "image": "SopaLentejas.jpg",
    },
    {
        "title": "Smoothie de avena y frutas",
        "description": "Bebida nutritiva con avena, banana y frutos rojos.",
        "kcal": 200,
        "time": "10 min",
        "level": "Fácil",
        "ingredients": ["avena", "banana", "frutos rojos", "leche"],
        "steps": [
            "Remoja 1/4 de taza de avena en 1/2 taza de leche durante 5 minutos",
            "Licúa la avena remojada con 1 banana y 1/2 taza de frutos rojos",
            "Añade 1/2 taza de hielo y licúa nuevamente hasta obtener una textura suave",
            "Sirve frío inmediatamente",
        ],
        "image": "SmoothiedeAvenayFrutos.jpg",
    },
    {
        "title": "Salteado de quinoa con verduras",
        "description": "Plato completo y ligero a base de quinoa y vegetales.",
        "kcal": 400,
        "time": "25 min",
        "level": "Media",
        "ingredients": ["quinoa", "zanahoria", "brócoli", "pimiento"],
        "steps": [
            "Cocina 1 taza de quinoa según las indicaciones del paquete",
            "Saltea 1 zanahoria, 1 taza de brócoli y 1/2 pimiento en tiras durante 5 minutos",
            "Añade la quinoa cocida y mezcla bien",
            "Condimenta con sal, pimienta y salsa de soja ligera; cocina 2 minutos más y sirve",
        ],
        "image": "SalteadodeQuinoa.jpg",
    },
    {
        "title": "Huevos revueltos con tomate",
        "description": "Receta rápida y económica para un desayuno completo.",
        "kcal": 220,
        "time": "10 min",
        "level": "Fácil",
        "ingredients": ["huevo", "tomate", "cebolla"],
        "steps": [
            "Pica 1 tomate mediano y 1/4 de cebolla finamente",
            "Bate 2 huevos en un bol con una pizca de sal",
            "Saltea la cebolla y el tomate durante 2-3 minutos hasta que se ablanden",
            "Añade los huevos batidos y revuelve a fuego medio hasta que cuajen",
        ],
        "image": "HuevoRevuelto.jpg",
    },
    {
        "title": "Pasta con Atún y Tomate",
        "description": "Una comida rápida, económica y satisfactoria para cualquier día de la semana.",
        "kcal": 450,
        "time": "20 min",
        "level": "Fácil",
        "ingredients": ["pasta", "atún", "tomate", "cebolla", "aceite de oliva"],
        "steps": [
            "Cocina 150g de pasta según las instrucciones del paquete.",
            "Mientras tanto, pica finamente 1/2 cebolla y 1 tomate.",
            "Sofríe la cebolla en 1 cucharada de aceite de oliva hasta que esté transparente.",
            "Añade el tomate picado y cocina por 5 minutos.",
            "Escurre una lata de atún y añádelo a la sartén. Sazona con sal y pimienta.",
            "Mezcla la pasta cocida con la salsa de atún y tomate. Sirve caliente.",
        ],
    },
    {
        "title": "Batido Verde Detox",
        "description": "Un batido refrescante y lleno de nutrientes para empezar el día con energía.",
        "kcal": 180,
        "time": "5 min",
        "level": "Fácil",
        "ingredients": ["espinaca", "pepino", "manzana verde", "limón", "jengibre"],
        "steps": [
            "Lava bien 1 taza de espinacas frescas.",
            "Pela y corta 1/2 pepino y 1 manzana verde en trozos.",
            "Añade las espinacas, el pepino y la manzana a la licuadora.",
            "Agrega el jugo de 1/2 limón y una rodaja pequeña de jengibre fresco.",
            "Añade 1 taza de agua fría y licúa hasta que esté suave.",
        ],
    },
    {
        "title": "Tostadas de Aguacate y Huevo",
        "description": "Un desayuno clásico, nutritivo y delicioso que te mantendrá lleno.",
        "kcal": 320,
        "time": "10 min",
        "level": "Fácil",
        "ingredients": ["pan integral", "aguacate", "huevo", "limón"],
        "steps": [
            "Tuesta 2 rebanadas de pan integral a tu gusto.",
            "Cocina 2 huevos a la plancha o pochados.",
            "Machaca 1 aguacate maduro con unas gotas de limón, sal y pimienta.",
            "Unta el aguacate sobre las tostadas calientes.",
            "Coloca un huevo sobre cada tostada.",
        ],
    },
]


def reset(db) -> None:
    """Remove seeded recipes and demo accounts (cascades to their data)."""
    db.execute(delete(Recipe))
    emails = [ADMIN_USER["email"], HISTORY_USER["email"]]
    for user in db.scalars(select(User).where(User.email.in_(emails))):
        db.delete(user)
    db.commit()


def create_demo_user(db, profile: dict) -> User:
    return users_service.register_user(db, RegisterRequest(password=DEMO_PASSWORD, **profile))


def seed_history(db, user: User, recipes: list) -> None:
    """One plan per day for the last HISTORY_DAYS days, 1-3 random recipes each."""
    today = utc_today()
    for days_ago in range(1, HISTORY_DAYS + 1):
        plan = planner_service.get_or_create_plan(db, user.id, today - timedelta(days=days_ago))
        for _ in range(random.randint(1, 3)):
            planner_service.add_entry(db, user.id, plan.id, random.choice(recipes).id)


def main() -> None:
    logger.info("Seeding database...")
    init_db()

    SessionLocal = get_session_factory()
    with SessionLocal() as db:
        logger.info("Removing existing recipes and demo accounts")
        reset(db)

        admin = create_demo_user(db, ADMIN_USER)

        logger.info(f"Creating {len(MOCK_RECIPES)} recipes")
        recipes = [
            recipes_service.create_recipe(db, author_id=admin.id, **recipe)
            for recipe in MOCK_RECIPES
        ]

        historic = create_demo_user(db, HISTORY_USER)
        logger.info(f"Creating plan history for the last {HISTORY_DAYS} days")
        seed_history(db, historic, recipes[:3])

    logger.info("Seed complete")


if __name__ == "__main__":
    main()

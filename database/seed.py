"""
Datos de ejemplo: un usuario administrador, seis pets y dos intereses.

Uso:
    python -m database.seed            # inserta solo si la tabla pets está vacía
    python -m database.seed --reset    # elimina y recrea las tablas antes
"""

import argparse
import logging

from config import settings, configure_logging
from database.db import Database
from dependencies import ServiceContext
from models.adoption import AdoptionInterestCreate
from models.pets import PetCreate
from models.users import UserRegister

logger = logging.getLogger(__name__)

SAMPLE_USER = {
    "email": "admin@miaudota.com",
    "password": "admin123",
    "name": "Administrator",
    "phone": "(11) 99999-9999",
}

SAMPLE_PETS = [
    {
        "name": "Luna", "species": "Cat", "breed": "Siamese",
        "age": 2, "age_unit": "years", "gender": "F", "size": "small", "weight": 3.5,
        "description": "Gentle and playful, loves cuddles and is used to children. Neutered and vaccinated.",
        "health_info": "Vaccinated, dewormed and neutered. Healthy.",
        "temperament": "Gentle, playful", "location": "São Paulo, SP",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": True,
        "image_url": "https://images.unsplash.com/photo-1514888286974-6d03bde4ba6d?w=600&h=400&fit=crop",
    },
    {
        "name": "Thor", "species": "Dog", "breed": "Labrador",
        "age": 3, "age_unit": "years", "gender": "M", "size": "large", "weight": 28.0,
        "description": "Very friendly and loves children. House-trained.",
        "health_info": "Vaccinated, dewormed and neutered. Healthy weight.",
        "temperament": "Friendly, playful", "location": "Rio de Janeiro, RJ",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": True,
        "image_url": "https://images.unsplash.com/photo-1552053831-71594a27632d?w=600&h=400&fit=crop",
    },
    {
        "name": "Mimi", "species": "Cat", "breed": "Persian",
        "age": 4, "age_unit": "years", "gender": "F", "size": "small", "weight": 4.2,
        "description": "Calm and affectionate, ideal for an apartment. Used to other animals.",
        "health_info": "Vaccinated and dewormed. Long fur needs care.",
        "temperament": "Calm, affectionate", "location": "Belo Horizonte, MG",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": True,
        "image_url": "https://images.unsplash.com/photo-1543852786-1cf6624b9987?w=600&h=400&fit=crop",
    },
    {
        "name": "Rex", "species": "Dog", "breed": "Mixed breed",
        "age": 8, "age_unit": "months", "gender": "M", "size": "medium", "weight": 12.5,
        "description": "Playful and full of energy. Loves walks and is in training.",
        "health_info": "Vaccinated and dewormed. Healthy.",
        "temperament": "Energetic, playful", "location": "Curitiba, PR",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": False,
        "image_url": "https://images.unsplash.com/photo-1561037404-61cd46aa615b?w=600&h=400&fit=crop",
    },
    {
        "name": "Nina", "species": "Dog", "breed": "Poodle",
        "age": 5, "age_unit": "years", "gender": "F", "size": "small", "weight": 6.8,
        "description": "Very smart and obedient. Knows several commands and is very affectionate.",
        "health_info": "Vaccinated, dewormed and neutered. Ideal weight.",
        "temperament": "Smart, obedient", "location": "Porto Alegre, RS",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": True,
        "image_url": "https://images.unsplash.com/photo-1591160690555-5debfba289f0?w=600&h=400&fit=crop",
    },
    {
        "name": "Mel", "species": "Cat", "breed": "Mixed breed",
        "age": 1, "age_unit": "years", "gender": "F", "size": "small", "weight": 2.8,
        "description": "Very playful and curious kitten. Learning to use the litter box.",
        "health_info": "Vaccinated and dewormed. Healthy.",
        "temperament": "Playful, curious", "location": "Florianópolis, SC",
        "is_vaccinated": True, "is_dewormed": True, "is_neutered": False,
        "image_url": "https://images.unsplash.com/photo-1513360371669-4adf3dd7dff8?w=600&h=400&fit=crop",
    },
]

# índice del pet en SAMPLE_PETS -> datos del interesado
SAMPLE_INTERESTS = [
    (0, {
        "user_name": "Maria Silva", "user_email": "maria@email.com",
        "user_phone": "(11) 98888-7777",
        "message": "I loved Luna! I have experience with Siamese cats.",
    }),
    (1, {
        "user_name": "João Santos", "user_email": "joao@email.com",
        "user_phone": "(21) 97777-6666",
        "message": "Looking for a dog for my family. I have two children.",
    }),
]


def insert_sample_data(database: Database) -> bool:
    """
    Inserta los datos de ejemplo si no hay pets.

    Returns:
        True si se insertaron datos, False si ya existían
    """
    with ServiceContext(database) as ctx:
        if ctx.pet_repo.count() > 0:
            logger.info("Ya existen pets, se omiten los datos de ejemplo")
            return False

        admin = ctx.user_repo.find_by_email(SAMPLE_USER["email"])
        if admin is None:
            admin = ctx.user_service.register(UserRegister(**SAMPLE_USER))

        pet_ids = [
            ctx.pet_service.create_pet(PetCreate(**pet), creator_id=admin.id).id
            for pet in SAMPLE_PETS
        ]
        for index, interest in SAMPLE_INTERESTS:
            ctx.adoption_service.register_interest(
                AdoptionInterestCreate(pet_id=pet_ids[index], **interest)
            )

    logger.info(f"{len(SAMPLE_PETS)} pets y {len(SAMPLE_INTERESTS)} intereses de ejemplo insertados")
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Carga datos de ejemplo en la base de datos")
    parser.add_argument("--reset", action="store_true", help="eliminar y recrear las tablas antes")
    args = parser.parse_args(argv)

    configure_logging()
    database = Database(settings.database_url)
    try:
        if args.reset:
            database.drop_tables()
        database.create_tables()
        insert_sample_data(database)
    finally:
        database.dispose()


if __name__ == "__main__":
    main()

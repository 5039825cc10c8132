"""Sample listings for a fresh install."""

from datetime import datetime

from core.models import Gender, Pet


def sample_pets(created_at: datetime) -> list[Pet]:
    """The three listings shown on an empty marketplace."""
    return [
        Pet(
            id="1",
            name="Buddy",
            breed="Golden Retriever",
            age="2 years",
            gender=Gender.MALE,
            health_info="Vaccinated, healthy, very active",
            description=(
                "Buddy is a friendly and energetic Golden Retriever who loves "
                "playing fetch and swimming. He's great with kids and other dogs."
            ),
            image="/src/assets/pet-1.jpg",
            seller_contact="john@example.com | (555) 123-4567",
            owner_id="demo-user",
            created_at=created_at,
        ),
        Pet(
            id="2",
            name="Whiskers",
            breed="Tabby Cat",
            age="3 years",
            gender=Gender.FEMALE,
            health_info="Spayed, all shots up to date",
            description=(
                "Whiskers is a calm and affectionate cat who loves to curl up on "
                "your lap. She's perfect for apartment living."
            ),
            image="/src/assets/pet-2.jpg",
            seller_contact="sarah@example.com | (555) 234-5678",
            owner_id="demo-user-2",
            created_at=created_at,
        ),
        Pet(
            id="3",
            name="Max",
            breed="Border Collie",
            age="1 year",
            gender=Gender.MALE,
            health_info="Young, healthy, high energy",
            description=(
                "Max is an intelligent and trainable Border Collie puppy. He needs "
                "an active family who can keep up with his energy."
            ),
            image="/src/assets/pet-3.jpg",
            seller_contact="mike@example.com | (555) 345-6789",
            owner_id="demo-user-3",
            created_at=created_at,
        ),
    ]

"""
Boruto Api — Hero Catalog Fixture
=================================

What:  The fixed hero catalog, split into five pages of three heroes.
How:   Raw records are validated into frozen `Hero` models once, at import time.
       `PAGES` is a tuple of tuples so neither the page list nor any page can be
       reassigned or appended to at runtime.

Page membership is part of the API contract: clients paginate with
`?page=1..5`, and the search endpoint scans the pages in this order.
"""

from typing import Tuple

from app.schemas.hero import Hero

PAGE_SIZE = 3

_RAW_HEROES = [
    # ── Page 1 ────────────────────────────────────────────────────────────
    {
        "id": 1,
        "name": "Sasuke",
        "image": "/images/sasuke.jpg",
        "about": (
            "Sasuke Uchiha is one of the last surviving members of the Uchiha clan. "
            "After years of pursuing revenge he returned to the Hidden Leaf and now "
            "protects it from the shadows, travelling the world to investigate threats."
        ),
        "rating": 5.0,
        "power": 98,
        "month": "July",
        "day": "23rd",
        "family": ["Fugaku", "Mikoto", "Itachi", "Sarada", "Sakura"],
        "abilities": ["Sharingan", "Rinnegan", "Sussano", "Amateratsu", "Intelligence"],
        "natureTypes": ["Lightning", "Fire", "Wind", "Earth", "Water"],
    },
    {
        "id": 2,
        "name": "Naruto",
        "image": "/images/naruto.jpg",
        "about": (
            "Naruto Uzumaki is the Seventh Hokage of the Hidden Leaf. Once shunned as the "
            "host of the Nine-Tails, he earned the village's respect and brought an end "
            "to the Fourth Shinobi World War."
        ),
        "rating": 5.0,
        "power": 98,
        "month": "Oct",
        "day": "10th",
        "family": ["Minato", "Kushina", "Boruto", "Himawari", "Hinata"],
        "abilities": ["Rasengan", "Rasen-Shuriken", "Shadow Clone", "Senin Mode"],
        "natureTypes": ["Wind", "Earth", "Lava", "Fire"],
    },
    {
        "id": 3,
        "name": "Sakura",
        "image": "/images/sakura.jpg",
        "about": (
            "Sakura Uchiha is a medical-nin of the Hidden Leaf and a former member of "
            "Team 7. Trained by Tsunade, she combines monstrous strength with precise "
            "chakra control."
        ),
        "rating": 4.5,
        "power": 92,
        "month": "Mar",
        "day": "28th",
        "family": ["Kizashi", "Mebuki", "Sarada", "Sasuke"],
        "abilities": ["Chakra Control", "Medical Ninjutsu", "Strength", "Intelligence"],
        "natureTypes": ["Earth", "Water", "Fire"],
    },
    # ── Page 2 ────────────────────────────────────────────────────────────
    {
        "id": 4,
        "name": "Boruto",
        "image": "/images/boruto.jpg",
        "about": (
            "Boruto Uzumaki is the son of the Seventh Hokage. Marked with the Karma seal "
            "by Momoshiki, he trains under Sasuke while learning what being a shinobi "
            "really means."
        ),
        "rating": 4.0,
        "power": 95,
        "month": "Mar",
        "day": "27th",
        "family": ["Naruto", "Hinata", "Hima"],
        "abilities": ["Karma", "Jogan", "Rasengan", "Intelligence"],
        "natureTypes": ["Lightning", "Wind", "Water"],
    },
    {
        "id": 5,
        "name": "Sarada",
        "image": "/images/sarada.jpg",
        "about": (
            "Sarada Uchiha is a kunoichi of the Hidden Leaf and a member of Team Konohamaru. "
            "She awakened her Sharingan at a young age and dreams of becoming Hokage."
        ),
        "rating": 4.9,
        "power": 95,
        "month": "Mar",
        "day": "31st",
        "family": ["Sasuke", "Sakura"],
        "abilities": ["Sharingan", "Strength", "Intelligence"],
        "natureTypes": ["Lightning", "Wind", "Fire"],
    },
    {
        "id": 6,
        "name": "Mitsuki",
        "image": "/images/mitsuki.jpg",
        "about": (
            "Mitsuki is a synthetic human created by Orochimaru. He left the Hidden Sound "
            "to find his own path and joined Team Konohamaru, where he found his sun in "
            "Boruto."
        ),
        "rating": 4.9,
        "power": 95,
        "month": "Jul",
        "day": "25th",
        "family": ["Orochimaru"],
        "abilities": ["Senin Mode", "Transformation", "Intelligence"],
        "natureTypes": ["Lightning", "Wind"],
    },
    # ── Page 3 ────────────────────────────────────────────────────────────
    {
        "id": 7,
        "name": "Kawaki",
        "image": "/images/kawaki.jpg",
        "about": (
            "Kawaki is a former vessel of the Kara organisation who bears the Karma seal "
            "of Isshiki Otsutsuki. Taken in by the Uzumaki family, he grows fiercely loyal "
            "to Naruto."
        ),
        "rating": 4.2,
        "power": 92,
        "month": "Jan",
        "day": "1st",
        "family": ["Kokatsu"],
        "abilities": ["Karma", "Transformation", "Strength"],
        "natureTypes": ["Fire"],
    },
    {
        "id": 8,
        "name": "Orochimaru",
        "image": "/images/orochimaru.jpg",
        "about": (
            "Orochimaru is one of the Legendary Sannin. Obsessed with forbidden jutsu and "
            "immortality, he abandoned the Hidden Leaf and now conducts his research under "
            "close watch."
        ),
        "rating": 4.5,
        "power": 97,
        "month": "Oct",
        "day": "27th",
        "family": ["Mitsuki"],
        "abilities": ["Senin Mode", "Transformation", "Science"],
        "natureTypes": ["Lightning", "Wind", "Fire", "Earth", "Water"],
    },
    {
        "id": 9,
        "name": "Kakashi",
        "image": "/images/kakashi.jpg",
        "about": (
            "Kakashi Hatake is the former leader of Team 7 and the Sixth Hokage. Known as "
            "the Copy Ninja, he has mastered over a thousand techniques."
        ),
        "rating": 4.5,
        "power": 95,
        "month": "Sep",
        "day": "15th",
        "family": ["Sakumo"],
        "abilities": ["Sharingan", "Mangekyo Sharingan", "Intelligence"],
        "natureTypes": ["Lightning", "Water", "Fire", "Earth", "Wind"],
    },
    # ── Page 4 ────────────────────────────────────────────────────────────
    {
        "id": 10,
        "name": "Jiraiya",
        "image": "/images/jiraiya.jpg",
        "about": (
            "Jiraiya is one of the Legendary Sannin and the teacher of both the Fourth and "
            "the Seventh Hokage. A master of Sage Mode and toad summoning."
        ),
        "rating": 4.8,
        "power": 97,
        "month": "Nov",
        "day": "11th",
        "family": ["Naruto"],
        "abilities": ["Senin Mode", "Rasengan", "Summoning"],
        "natureTypes": ["Fire", "Earth", "Wind", "Water"],
    },
    {
        "id": 11,
        "name": "Itachi",
        "image": "/images/itachi.jpg",
        "about": (
            "Itachi Uchiha was a prodigy of the Uchiha clan who carried the weight of his "
            "clan's downfall to protect the Hidden Leaf and his younger brother."
        ),
        "rating": 4.9,
        "power": 96,
        "month": "Jun",
        "day": "9th",
        "family": ["Fugaku", "Mikoto", "Sasuke"],
        "abilities": ["Sharingan", "Mangekyo Sharingan", "Sussano", "Genjutsu"],
        "natureTypes": ["Fire", "Water", "Wind"],
    },
    {
        "id": 12,
        "name": "Hinata",
        "image": "/images/hinata.jpg",
        "about": (
            "Hinata Uzumaki is a former heiress of the Hyuga clan. Gentle but resolute, "
            "she wields the Byakugan and the Gentle Fist."
        ),
        "rating": 4.6,
        "power": 88,
        "month": "Dec",
        "day": "27th",
        "family": ["Hiashi", "Hanabi", "Naruto", "Boruto", "Himawari"],
        "abilities": ["Byakugan", "Gentle Fist", "Chakra Control"],
        "natureTypes": ["Fire", "Lightning"],
    },
    # ── Page 5 ────────────────────────────────────────────────────────────
    {
        "id": 13,
        "name": "Isshiki",
        "image": "/images/isshiki.jpg",
        "about": (
            "Isshiki Otsutsuki arrived on Earth with Kaguya to plant a Divine Tree. Left "
            "for dead, he survived by inscribing his Karma on Jigen."
        ),
        "rating": 5.0,
        "power": 100,
        "month": "Jan",
        "day": "1st",
        "family": ["Otsutsuki Clan"],
        "abilities": ["Sukunahikona", "Daikokuten", "Byakugan", "Rinnegan"],
        "natureTypes": ["Lightning", "Fire", "Wind", "Water", "Earth"],
    },
    {
        "id": 14,
        "name": "Momoshiki",
        "image": "/images/momoshiki.jpg",
        "about": (
            "Momoshiki Otsutsuki travelled to Earth seeking the chakra of the Nine-Tails. "
            "Defeated by Boruto, he left his Karma on the boy."
        ),
        "rating": 3.9,
        "power": 98,
        "month": "Jan",
        "day": "1st",
        "family": ["Otsutsuki Clan"],
        "abilities": ["Byakugan", "Rinnegan", "Karma", "Chakra Absorption"],
        "natureTypes": ["Lightning", "Fire", "Wind", "Water", "Earth"],
    },
    {
        "id": 15,
        "name": "Kaguya",
        "image": "/images/kaguya.jpg",
        "about": (
            "Kaguya Otsutsuki consumed the fruit of the God Tree and became the progenitor "
            "of chakra. Her sealing ended the Fourth Shinobi World War."
        ),
        "rating": 5.0,
        "power": 100,
        "month": "Jan",
        "day": "1st",
        "family": ["Otsutsuki Clan", "Hagoromo", "Hamura"],
        "abilities": ["Byakugan", "Rinnegan", "Dimension Travel", "Sealing"],
        "natureTypes": ["Lightning", "Fire", "Wind", "Water", "Earth", "Yin", "Yang"],
    },
]


def _paginate(heroes: Tuple[Hero, ...], size: int) -> Tuple[Tuple[Hero, ...], ...]:
    return tuple(heroes[i:i + size] for i in range(0, len(heroes), size))


HEROES: Tuple[Hero, ...] = tuple(Hero.model_validate(raw) for raw in _RAW_HEROES)

PAGES: Tuple[Tuple[Hero, ...], ...] = _paginate(HEROES, PAGE_SIZE)

PAGE_COUNT = len(PAGES)

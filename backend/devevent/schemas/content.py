"""
Pydantic schemas for the static seed events and navigation links.
"""

from pydantic import BaseModel


class SeedEvent(BaseModel):
    id: str
    title: str
    image: str
    location: str
    date: str
    time: str
    description: str
    url: str

    model_config = {"frozen": True}


class NavLink(BaseModel):
    label: str
    href: str

    model_config = {"frozen": True}


class Navigation(BaseModel):
    brand: str
    logo: str
    links: list[NavLink]

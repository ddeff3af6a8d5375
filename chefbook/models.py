from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from werkzeug.security import check_password_hash

from .db import Base


class Chef(Base):
    __tablename__ = "chefs"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(80), unique=True, index=True, nullable=False)
    email = Column(String(120), nullable=False)
    password = Column(String(256), nullable=False)  # werkzeug hash
    is_admin = Column(Boolean, nullable=False, default=False)

    recipes = relationship("Recipe", back_populates="author")

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password, password)

    def __repr__(self):
        return f"<Chef {self.id} {self.username}>"


class Ingredient(Base):
    __tablename__ = "ingredients"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), index=True, nullable=False)

    def __repr__(self):
        return f"<Ingredient {self.id} {self.name}>"


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), index=True, nullable=False)
    instructions = Column(Text, nullable=False, default="")
    chef_id = Column(Integer, ForeignKey("chefs.id"), nullable=False)

    # joined load: every recipe row arrives with its author
    author = relationship("Chef", back_populates="recipes", lazy="joined")

    def __repr__(self):
        return f"<Recipe {self.id} {self.name}>"

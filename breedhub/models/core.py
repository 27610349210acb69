from sqlalchemy import Column, Float, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from breedhub.models.base import Base, TimestampedMixin, new_uuid

dog_temperaments = Table(
    "dog_temperaments",
    Base.metadata,
    Column("dog_id", ForeignKey("dogs.id", ondelete="CASCADE"), primary_key=True),
    Column("temperament_id", ForeignKey("temperaments.id", ondelete="CASCADE"), primary_key=True),
)


class Dog(Base, TimestampedMixin):
    __tablename__ = "dogs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    height_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    height_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    years_life: Mapped[str | None] = mapped_column(String(120), nullable=True)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    temperaments: Mapped[list["Temperament"]] = relationship(
        secondary=dog_temperaments,
        back_populates="dogs",
        order_by="Temperament.id",
        passive_deletes=True,
    )


class Temperament(Base):
    __tablename__ = "temperaments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)

    dogs: Mapped[list["Dog"]] = relationship(
        secondary=dog_temperaments,
        back_populates="temperaments",
        passive_deletes=True,
    )

"""
Pancake recipes.

A recipe is a closed tagged union discriminated on ``kind``:

- five fixed recipes, each with a hardcoded ingredient sequence
- ``CustomPancake``, built up one ingredient at a time and frozen by ``finish()``

Every recipe renders the same way::

    >>> MilkChocolateHazelnutsPancake().description()
    'Delicious pancake with milk chocolate, hazelnuts!'

Recipes are tagged with the id of the order they belong to when the order
service attaches them.
"""

from enum import Enum
from typing import Annotated, ClassVar, Literal, Union
from uuid import UUID

from pydantic import BaseModel, Field

from .errors import InvalidOrderStateError


class PancakeIngredient(str, Enum):
    """Ingredients available for custom pancakes."""
    MILK_CHOCOLATE = "milk chocolate"
    DARK_CHOCOLATE = "dark chocolate"
    HAZELNUTS = "hazelnuts"
    WHIPPED_CREAM = "whipped cream"
    MUSTARD = "mustard"


class BasePancake(BaseModel):
    """Shared behaviour for all recipe variants."""

    kind: str
    order_id: UUID | None = None

    def ingredients(self) -> tuple[str, ...]:
        """
        Return the ingredient names in display order.

        Every variant must override this; the base class has no ingredients.
        """
        raise NotImplementedError

    def description(self) -> str:
        """Render the human readable description of this pancake."""
        return f"Delicious pancake with {', '.join(self.ingredients())}!"


# =============================================================================
# Fixed Recipes
# =============================================================================

class FixedPancake(BasePancake):
    """A recipe whose ingredients never change."""

    INGREDIENTS: ClassVar[tuple[str, ...]] = ()

    def ingredients(self) -> tuple[str, ...]:
        return self.INGREDIENTS


class DarkChocolatePancake(FixedPancake):
    kind: Literal["dark_chocolate"] = "dark_chocolate"
    INGREDIENTS: ClassVar[tuple[str, ...]] = ("dark chocolate",)


class DarkChocolateWhippedCreamPancake(FixedPancake):
    kind: Literal["dark_chocolate_whipped_cream"] = "dark_chocolate_whipped_cream"
    INGREDIENTS: ClassVar[tuple[str, ...]] = ("dark chocolate", "whipped cream")


class DarkChocolateWhippedCreamHazelnutsPancake(FixedPancake):
    kind: Literal["dark_chocolate_whipped_cream_hazelnuts"] = "dark_chocolate_whipped_cream_hazelnuts"
    INGREDIENTS: ClassVar[tuple[str, ...]] = (
        "dark chocolate",
        "mustard",
        "whipped cream",
        "hazelnuts",
    )


class MilkChocolatePancake(FixedPancake):
    kind: Literal["milk_chocolate"] = "milk_chocolate"
    INGREDIENTS: ClassVar[tuple[str, ...]] = ("milk chocolate",)


class MilkChocolateHazelnutsPancake(FixedPancake):
    kind: Literal["milk_chocolate_hazelnuts"] = "milk_chocolate_hazelnuts"
    INGREDIENTS: ClassVar[tuple[str, ...]] = ("milk chocolate", "hazelnuts")


# =============================================================================
# Custom Recipe
# =============================================================================

class CustomPancake(BasePancake):
    """
    A pancake assembled ingredient by ingredient.

    ``finish()`` snapshots the accumulated ingredient names. Ingredients added
    afterwards are kept in ``ingredient_list`` but do not show up in the
    description.
    """

    kind: Literal["custom"] = "custom"
    ingredient_list: list[PancakeIngredient] = Field(default_factory=list)
    ingredient_names: tuple[str, ...] | None = None

    @property
    def is_finished(self) -> bool:
        return self.ingredient_names is not None

    def add_ingredient(self, ingredient: PancakeIngredient) -> None:
        self.ingredient_list.append(PancakeIngredient(ingredient))

    def finish(self) -> None:
        self.ingredient_names = tuple(i.value for i in self.ingredient_list)

    def ingredients(self) -> tuple[str, ...]:
        if self.ingredient_names is None:
            raise InvalidOrderStateError("custom pancake not finished", self.order_id)
        return self.ingredient_names


Pancake = Annotated[
    Union[
        DarkChocolatePancake,
        DarkChocolateWhippedCreamPancake,
        DarkChocolateWhippedCreamHazelnutsPancake,
        MilkChocolatePancake,
        MilkChocolateHazelnutsPancake,
        CustomPancake,
    ],
    Field(discriminator="kind"),
]


class FixedRecipe(str, Enum):
    """Names of the fixed recipes that can be ordered by count."""
    DARK_CHOCOLATE = "dark_chocolate"
    DARK_CHOCOLATE_WHIPPED_CREAM = "dark_chocolate_whipped_cream"
    DARK_CHOCOLATE_WHIPPED_CREAM_HAZELNUTS = "dark_chocolate_whipped_cream_hazelnuts"
    MILK_CHOCOLATE = "milk_chocolate"
    MILK_CHOCOLATE_HAZELNUTS = "milk_chocolate_hazelnuts"

    def build(self) -> FixedPancake:
        """Create a fresh, untagged pancake of this recipe."""
        return FIXED_PANCAKES[self]()


FIXED_PANCAKES: dict[FixedRecipe, type[FixedPancake]] = {
    FixedRecipe.DARK_CHOCOLATE: DarkChocolatePancake,
    FixedRecipe.DARK_CHOCOLATE_WHIPPED_CREAM: DarkChocolateWhippedCreamPancake,
    FixedRecipe.DARK_CHOCOLATE_WHIPPED_CREAM_HAZELNUTS: DarkChocolateWhippedCreamHazelnutsPancake,
    FixedRecipe.MILK_CHOCOLATE: MilkChocolatePancake,
    FixedRecipe.MILK_CHOCOLATE_HAZELNUTS: MilkChocolateHazelnutsPancake,
}

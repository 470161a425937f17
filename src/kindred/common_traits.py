"""
Traits shared by several kindreds.
"""

from src.traits.trait_data import AdjustmentType, TraitDefinition, TraitType

COLD_IRON_VULNERABILITY = TraitDefinition(
    trait_id="cold_iron_vuln",
    name="Cold Iron",
    trait_type=TraitType.ADJUSTMENT,
    description=(
        "As fairy creatures, cold iron weapons inflict +1 damage on this "
        "character."
    ),
    adjustment_type=AdjustmentType.INFO,
    adjustment_condition="+1 damage taken from cold iron",
)

IMMORTAL = TraitDefinition(
    trait_id="immortal",
    name="Immortality",
    description="Fairies do not age and can only be killed by violence.",
)

SMALL_SIZE = TraitDefinition(
    trait_id="small_size",
    name="Small",
    trait_type=TraitType.SIZE_RESTRICTION,
    description="Small characters cannot use Large weapons or armour sized for Large folk.",
    size_restriction="small",
)

FAIRY_MAGIC_RESISTANCE = TraitDefinition(
    trait_id="magic_resistance",
    name="Magic Resistance",
    trait_type=TraitType.ADJUSTMENT,
    description="Fairies gain +2 Magic Resistance.",
    adjustment_type=AdjustmentType.STATIC,
    adjustment_target="magic_resistance",
    adjustment_value=2,
)

AC_VS_LARGE = TraitDefinition(
    trait_id="ac_vs_large",
    name="Defensive Bonus",
    trait_type=TraitType.ADJUSTMENT,
    description="Small folk gain +2 AC when attacked by Large creatures.",
    adjustment_type=AdjustmentType.INFO,
    adjustment_condition="+2 AC against Large creatures",
)

KEEN_SENSES_LISTEN = TraitDefinition(
    trait_id="keen_senses_listen",
    name="Keen Hearing",
    trait_type=TraitType.ADJUSTMENT,
    description="This character's Listen skill target is 5.",
    adjustment_type=AdjustmentType.SKILL_OVERRIDE,
    adjustment_targets=("skills.listen",),
    adjustment_value=5,
)

HOLY_SPELL_FAILURE = TraitDefinition(
    trait_id="holy_spell_failure",
    name="Resistance to Holy Magic",
    trait_type=TraitType.ACTIVE,
    description="Holy spells cast to aid this character fail on a roll of 1-2 on a d6.",
    rollable=True,
    roll_formula="1d6",
    roll_target=2,
)

"""Payload records nested inside journal events.

Every wire name is written out as an alias. The journal mixes PascalCase,
Snake_Case_With_Capitals and upper-case acronyms (FID, ShipID, VIP) with no
pattern that could be derived mechanically.
"""

from pydantic import Field
from pydantic import NonNegativeInt

from imbue.elite_journal.model import JournalModel
from imbue.elite_journal.primitives import IntBool


class CargoEntry(JournalModel):
    """One commodity line in the Cargo inventory."""

    name: str = Field(alias="Name", description="Internal commodity name")
    count: NonNegativeInt = Field(alias="Count")
    stolen: NonNegativeInt = Field(alias="Stolen", description="How many of count are stolen")
    mission_id: NonNegativeInt | None = Field(
        default=None,
        alias="MissionID",
        description="Set when the cargo belongs to a delivery mission",
    )


class FuelCapacity(JournalModel):
    main: float = Field(alias="Main")
    reserve: float = Field(alias="Reserve")


class EngineeringModifier(JournalModel):
    """A single stat changed by an engineering blueprint."""

    label: str = Field(alias="Label")
    # Absent for modifiers that only carry a string value (e.g. weapon modes)
    value: float | None = Field(default=None, alias="Value")
    original_value: float = Field(alias="OriginalValue")
    less_is_good: IntBool = Field(
        alias="LessIsGood",
        description="Whether a lower value is an improvement; written as 0 or 1",
    )


class Engineering(JournalModel):
    """The engineering applied to a module."""

    engineer_id: NonNegativeInt = Field(alias="EngineerID")
    # The game sometimes writes engineering without the engineer's name
    engineer: str = Field(default="", alias="Engineer")
    blueprint_id: NonNegativeInt = Field(alias="BlueprintID")
    blueprint_name: str = Field(alias="BlueprintName")
    level: NonNegativeInt = Field(alias="Level")
    quality: float = Field(alias="Quality")
    experimental_effect: str | None = Field(default=None, alias="ExperimentalEffect")
    modifiers: tuple[EngineeringModifier, ...] = Field(alias="Modifiers")


class Module(JournalModel):
    """A module fitted to a ship, as listed in a Loadout."""

    slot: str = Field(alias="Slot")
    item: str = Field(alias="Item")
    on: bool = Field(alias="On")
    priority: NonNegativeInt = Field(alias="Priority", description="Power priority group")
    health: float = Field(alias="Health")
    value: NonNegativeInt = Field(default=0, alias="Value")
    ammo_in_clip: NonNegativeInt | None = Field(
        default=None,
        alias="AmmoInClip",
        description="For passenger cabins this holds the number of seats",
    )
    ammo_in_hopper: NonNegativeInt | None = Field(default=None, alias="AmmoInHopper")
    engineering: Engineering | None = Field(default=None, alias="Engineering")


class Material(JournalModel):
    name: str = Field(alias="Name")
    count: NonNegativeInt = Field(alias="Count")


class Mission(JournalModel):
    mission_id: NonNegativeInt = Field(alias="MissionID")
    name: str = Field(alias="Name")
    passenger_mission: bool = Field(alias="PassengerMission")
    expires: NonNegativeInt = Field(alias="Expires", description="Seconds until the mission expires")


class PassengerRecord(JournalModel):
    """One group of passengers in the Passengers manifest."""

    mission_id: NonNegativeInt = Field(alias="MissionID")
    passenger_type: str = Field(alias="Type")
    vip: bool = Field(alias="VIP")
    wanted: bool = Field(alias="Wanted")
    count: NonNegativeInt = Field(alias="Count")


class StatusFuel(JournalModel):
    fuel_main: float = Field(alias="FuelMain")
    fuel_reservoir: float = Field(alias="FuelReservoir")


# =============================================================================
# Statistics groups
#
# Counters introduced by later game versions default to 0 so that statistics
# written by older builds still decode.
# =============================================================================


class BankAccountStatistics(JournalModel):
    current_wealth: NonNegativeInt = Field(alias="Current_Wealth")
    spent_on_ships: NonNegativeInt = Field(alias="Spent_On_Ships")
    spent_on_outfitting: NonNegativeInt = Field(alias="Spent_On_Outfitting")
    spent_on_repairs: NonNegativeInt = Field(alias="Spent_On_Repairs")
    spent_on_fuel: NonNegativeInt = Field(alias="Spent_On_Fuel")
    spent_on_ammo_consumables: NonNegativeInt = Field(alias="Spent_On_Ammo_Consumables")
    insurance_claims: NonNegativeInt = Field(alias="Insurance_Claims")
    spent_on_insurance: NonNegativeInt = Field(alias="Spent_On_Insurance")
    owned_ship_count: NonNegativeInt = Field(alias="Owned_Ship_Count")
    # Added with Odyssey
    spent_on_suits: NonNegativeInt = Field(default=0, alias="Spent_On_Suits")
    spent_on_weapons: NonNegativeInt = Field(default=0, alias="Spent_On_Weapons")
    spent_on_suit_consumables: NonNegativeInt = Field(default=0, alias="Spent_On_Suit_Consumables")
    suits_owned: NonNegativeInt = Field(default=0, alias="Suits_Owned")
    weapons_owned: NonNegativeInt = Field(default=0, alias="Weapons_Owned")
    spent_on_premium_stock: NonNegativeInt = Field(default=0, alias="Spent_On_Premium_Stock")
    premium_stock_bought: NonNegativeInt = Field(default=0, alias="Premium_Stock_Bought")


class CombatStatistics(JournalModel):
    bounties_claimed: NonNegativeInt = Field(default=0, alias="Bounties_Claimed")
    bounty_hunting_profit: NonNegativeInt = Field(default=0, alias="Bounty_Hunting_Profit")
    combat_bonds: NonNegativeInt = Field(default=0, alias="Combat_Bonds")
    combat_bond_profits: NonNegativeInt = Field(default=0, alias="Combat_Bond_Profits")
    assassinations: NonNegativeInt = Field(default=0, alias="Assassinations")
    assassination_profits: NonNegativeInt = Field(default=0, alias="Assassination_Profits")
    highest_single_reward: NonNegativeInt = Field(default=0, alias="Highest_Single_Reward")
    skimmers_killed: NonNegativeInt = Field(default=0, alias="Skimmers_Killed")


class CrimeStatistics(JournalModel):
    notoriety: NonNegativeInt = Field(default=0, alias="Notoriety")
    fines: NonNegativeInt = Field(default=0, alias="Fines")
    total_fines: NonNegativeInt = Field(default=0, alias="Total_Fines")
    bounties_received: NonNegativeInt = Field(default=0, alias="Bounties_Received")
    total_bounties: NonNegativeInt = Field(default=0, alias="Total_Bounties")
    highest_bounty: NonNegativeInt = Field(default=0, alias="Highest_Bounty")


class SmugglingStatistics(JournalModel):
    black_markets_traded_with: NonNegativeInt = Field(default=0, alias="Black_Markets_Traded_With")
    black_markets_profits: NonNegativeInt = Field(default=0, alias="Black_Markets_Profits")
    resources_smuggled: NonNegativeInt = Field(default=0, alias="Resources_Smuggled")
    average_profit: float = Field(default=0.0, alias="Average_Profit")
    highest_single_transaction: NonNegativeInt = Field(default=0, alias="Highest_Single_Transaction")


class TradingStatistics(JournalModel):
    markets_traded_with: NonNegativeInt = Field(default=0, alias="Markets_Traded_With")
    market_profits: NonNegativeInt = Field(default=0, alias="Market_Profits")
    resources_traded: NonNegativeInt = Field(default=0, alias="Resources_Traded")
    average_profit: float = Field(default=0.0, alias="Average_Profit")
    highest_single_transaction: NonNegativeInt = Field(default=0, alias="Highest_Single_Transaction")


class MiningStatistics(JournalModel):
    mining_profits: NonNegativeInt = Field(default=0, alias="Mining_Profits")
    quantity_mined: NonNegativeInt = Field(default=0, alias="Quantity_Mined")
    materials_collected: NonNegativeInt = Field(default=0, alias="Materials_Collected")


class ExplorationStatistics(JournalModel):
    systems_visited: NonNegativeInt = Field(default=0, alias="Systems_Visited")
    exploration_profits: NonNegativeInt = Field(default=0, alias="Exploration_Profits")
    planets_scanned_to_level_2: NonNegativeInt = Field(default=0, alias="Planets_Scanned_To_Level_2")
    planets_scanned_to_level_3: NonNegativeInt = Field(default=0, alias="Planets_Scanned_To_Level_3")
    efficient_scans: NonNegativeInt = Field(default=0, alias="Efficient_Scans")
    highest_payout: NonNegativeInt = Field(default=0, alias="Highest_Payout")
    total_hyperspace_distance: float = Field(default=0.0, alias="Total_Hyperspace_Distance")
    total_hyperspace_jumps: NonNegativeInt = Field(default=0, alias="Total_Hyperspace_Jumps")
    greatest_distance_from_start: float = Field(default=0.0, alias="Greatest_Distance_From_Start")
    time_played: NonNegativeInt = Field(default=0, alias="Time_Played", description="Seconds played")


class PassengersStatistics(JournalModel):
    passengers_missions_accepted: NonNegativeInt = Field(default=0, alias="Passengers_Missions_Accepted")
    passengers_missions_disgruntled: NonNegativeInt = Field(default=0, alias="Passengers_Missions_Disgruntled")
    passengers_missions_bulk: NonNegativeInt = Field(default=0, alias="Passengers_Missions_Bulk")
    passengers_missions_vip: NonNegativeInt = Field(default=0, alias="Passengers_Missions_VIP")
    passengers_missions_delivered: NonNegativeInt = Field(default=0, alias="Passengers_Missions_Delivered")
    passengers_missions_ejected: NonNegativeInt = Field(default=0, alias="Passengers_Missions_Ejected")


class SearchAndRescueStatistics(JournalModel):
    search_rescue_traded: NonNegativeInt = Field(default=0, alias="SearchRescue_Traded")
    search_rescue_profit: NonNegativeInt = Field(default=0, alias="SearchRescue_Profit")
    search_rescue_count: NonNegativeInt = Field(default=0, alias="SearchRescue_Count")


class CraftingStatistics(JournalModel):
    count_of_used_engineers: NonNegativeInt = Field(default=0, alias="Count_Of_Used_Engineers")
    recipes_generated: NonNegativeInt = Field(default=0, alias="Recipes_Generated")
    recipes_generated_rank_1: NonNegativeInt = Field(default=0, alias="Recipes_Generated_Rank_1")
    recipes_generated_rank_2: NonNegativeInt = Field(default=0, alias="Recipes_Generated_Rank_2")
    recipes_generated_rank_3: NonNegativeInt = Field(default=0, alias="Recipes_Generated_Rank_3")
    recipes_generated_rank_4: NonNegativeInt = Field(default=0, alias="Recipes_Generated_Rank_4")
    recipes_generated_rank_5: NonNegativeInt = Field(default=0, alias="Recipes_Generated_Rank_5")


class CrewStatistics(JournalModel):
    npc_crew_total_wages: NonNegativeInt = Field(default=0, alias="NpcCrew_TotalWages")
    npc_crew_hired: NonNegativeInt = Field(default=0, alias="NpcCrew_Hired")
    npc_crew_fired: NonNegativeInt = Field(default=0, alias="NpcCrew_Fired")
    npc_crew_died: NonNegativeInt = Field(default=0, alias="NpcCrew_Died")


class MulticrewStatistics(JournalModel):
    multicrew_time_total: NonNegativeInt = Field(default=0, alias="Multicrew_Time_Total")
    multicrew_gunner_time_total: NonNegativeInt = Field(default=0, alias="Multicrew_Gunner_Time_Total")
    multicrew_fighter_time_total: NonNegativeInt = Field(default=0, alias="Multicrew_Fighter_Time_Total")
    multicrew_credits_total: NonNegativeInt = Field(default=0, alias="Multicrew_Credits_Total")
    multicrew_fines_total: NonNegativeInt = Field(default=0, alias="Multicrew_Fines_Total")

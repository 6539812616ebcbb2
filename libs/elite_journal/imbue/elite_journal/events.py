"""The closed set of journal events.

Events the game writes with fields that something downstream needs get their
own model, keyed by a Literal `event` tag. Every other known event is a
BareEvent: the tag (a BareEventName) is all that is kept.

EVENT_CLASS_BY_NAME is the single place that maps a tag to the model used to
decode it. Adding a new kind of event means adding a model to
PAYLOAD_EVENT_CLASSES or a member to BareEventName.
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Final
from typing import Literal

from pydantic import AwareDatetime
from pydantic import Field
from pydantic import NonNegativeInt

from imbue.elite_journal.model import JournalModel
from imbue.elite_journal.primitives import Channel
from imbue.elite_journal.primitives import Vessel
from imbue.elite_journal.records import BankAccountStatistics
from imbue.elite_journal.records import CargoEntry
from imbue.elite_journal.records import CombatStatistics
from imbue.elite_journal.records import CraftingStatistics
from imbue.elite_journal.records import CrewStatistics
from imbue.elite_journal.records import CrimeStatistics
from imbue.elite_journal.records import ExplorationStatistics
from imbue.elite_journal.records import FuelCapacity
from imbue.elite_journal.records import Material
from imbue.elite_journal.records import MiningStatistics
from imbue.elite_journal.records import Mission
from imbue.elite_journal.records import Module
from imbue.elite_journal.records import MulticrewStatistics
from imbue.elite_journal.records import PassengerRecord
from imbue.elite_journal.records import PassengersStatistics
from imbue.elite_journal.records import SearchAndRescueStatistics
from imbue.elite_journal.records import SmugglingStatistics
from imbue.elite_journal.records import StatusFuel
from imbue.elite_journal.records import TradingStatistics


class DuplicateEventNameError(ValueError):
    """Raised at import time when two models claim the same event tag."""


class JournalEventBase(JournalModel):
    """Base class for all decoded journal events."""

    event: str = Field(description="The discriminator tag naming the kind of event")


class TimestampedEvent(JournalEventBase):
    timestamp: AwareDatetime = Field(description="When the game wrote the event (always UTC)")


# =============================================================================
# Startup
# =============================================================================


class Fileheader(TimestampedEvent):
    """First event in every journal file."""

    event: Literal["Fileheader"] = "Fileheader"
    # When a journal reaches 500k lines the game writes a Continued event and
    # starts the next part in a new file.
    part: NonNegativeInt = Field(alias="part", description="Part number of this journal")
    odyssey: bool = Field(alias="Odyssey")
    language: str = Field(alias="language", description='Language code such as "German/DE"')
    gameversion: str = Field(alias="gameversion")
    build: str = Field(alias="build")


class Cargo(TimestampedEvent):
    """Cargo information, written at startup.

    After startup, Cargo events are written without an inventory and signal that
    Cargo.json was updated.
    """

    event: Literal["Cargo"] = "Cargo"
    vessel: Vessel = Field(alias="Vessel")
    count: NonNegativeInt = Field(alias="Count")
    inventory: tuple[CargoEntry, ...] = Field(default=(), alias="Inventory")


class ClearSavedGame(TimestampedEvent):
    event: Literal["ClearSavedGame"] = "ClearSavedGame"
    name: str = Field(alias="Name", description="Commander name")
    fid: str = Field(alias="FID", description="Player ID")


class Commander(TimestampedEvent):
    """Written at the start of the load game process."""

    event: Literal["Commander"] = "Commander"
    name: str = Field(alias="Name", description="Commander name")
    fid: str = Field(alias="FID", description="Player ID")


class Loadout(TimestampedEvent):
    """Written when loading from the main menu, switching ship, or docking the SRV."""

    event: Literal["Loadout"] = "Loadout"
    ship: str = Field(alias="Ship", description="Current ship type")
    ship_id: NonNegativeInt = Field(alias="ShipID")
    ship_name: str = Field(alias="ShipName", description="User defined ship name")
    ship_ident: str = Field(alias="ShipIdent", description="User defined ship ID")
    hull_value: NonNegativeInt = Field(alias="HullValue")
    modules_value: NonNegativeInt = Field(default=0, alias="ModulesValue")
    hull_health: float = Field(alias="HullHealth")
    unladen_mass: float = Field(alias="UnladenMass", description="Mass of hull and modules excluding cargo and fuel")
    fuel_capacity: FuelCapacity = Field(alias="FuelCapacity")
    cargo_capacity: NonNegativeInt = Field(alias="CargoCapacity")
    max_jump_range: float = Field(alias="MaxJumpRange")
    rebuy: NonNegativeInt = Field(alias="Rebuy")
    hot: bool = Field(default=False, alias="Hot")
    modules: tuple[Module, ...] = Field(alias="Modules")


class Materials(TimestampedEvent):
    event: Literal["Materials"] = "Materials"
    raw: tuple[Material, ...] = Field(alias="Raw")
    manufactured: tuple[Material, ...] = Field(alias="Manufactured")
    encoded: tuple[Material, ...] = Field(alias="Encoded")


class Missions(TimestampedEvent):
    event: Literal["Missions"] = "Missions"
    active: tuple[Mission, ...] = Field(alias="Active")
    failed: tuple[Mission, ...] = Field(alias="Failed")
    complete: tuple[Mission, ...] = Field(alias="Complete")


class NewCommander(TimestampedEvent):
    event: Literal["NewCommander"] = "NewCommander"
    name: str = Field(alias="Name", description="Commander name")
    fid: str = Field(alias="FID", description="Player ID")
    package: str = Field(alias="Package", description="Selected starter package")


class LoadGame(TimestampedEvent):
    event: Literal["LoadGame"] = "LoadGame"
    commander: str = Field(alias="Commander", description="Commander name")
    fid: str = Field(alias="FID", description="Player ID")
    horizons: bool = Field(alias="Horizons")
    odyssey: bool = Field(alias="Odyssey")
    game_mode: str | None = Field(default=None, alias="GameMode")
    credits: int | None = Field(default=None, alias="Credits")
    loan: int | None = Field(default=None, alias="Loan")


class Passengers(TimestampedEvent):
    event: Literal["Passengers"] = "Passengers"
    manifest: tuple[PassengerRecord, ...] = Field(alias="Manifest")


class Powerplay(TimestampedEvent):
    event: Literal["Powerplay"] = "Powerplay"
    power: str = Field(alias="Power")
    rank: NonNegativeInt = Field(alias="Rank")
    merits: NonNegativeInt = Field(alias="Merits")
    votes: NonNegativeInt = Field(alias="Votes")
    time_pledged: NonNegativeInt = Field(alias="TimePledged", description="Seconds pledged to the power")


class Progress(TimestampedEvent):
    """Percent progress towards the next rank in each category."""

    event: Literal["Progress"] = "Progress"
    combat: NonNegativeInt = Field(alias="Combat")
    trade: NonNegativeInt = Field(alias="Trade")
    explore: NonNegativeInt = Field(alias="Explore")
    soldier: NonNegativeInt = Field(alias="Soldier")
    exobiologist: NonNegativeInt = Field(alias="Exobiologist")
    empire: NonNegativeInt = Field(alias="Empire")
    federation: NonNegativeInt = Field(alias="Federation")
    cqc: NonNegativeInt = Field(alias="CQC")


class Rank(TimestampedEvent):
    event: Literal["Rank"] = "Rank"
    combat: NonNegativeInt = Field(alias="Combat")
    trade: NonNegativeInt = Field(alias="Trade")
    explore: NonNegativeInt = Field(alias="Explore")
    soldier: NonNegativeInt = Field(alias="Soldier")
    exobiologist: NonNegativeInt = Field(alias="Exobiologist")
    empire: NonNegativeInt = Field(alias="Empire")
    federation: NonNegativeInt = Field(alias="Federation")
    cqc: NonNegativeInt = Field(alias="CQC")


class Reputation(TimestampedEvent):
    """Reputation with the superpowers, written at startup after Rank and Progress.

    Thresholds: hostile -100..-90, unfriendly -90..-35, neutral -35..4,
    cordial 4..35, friendly 35..90, allied 90..100.
    """

    event: Literal["Reputation"] = "Reputation"
    empire: float = Field(alias="Empire")
    federation: float = Field(alias="Federation")
    independent: float = Field(alias="Independent")
    alliance: float = Field(alias="Alliance")


class Statistics(TimestampedEvent):
    event: Literal["Statistics"] = "Statistics"
    bank_account: BankAccountStatistics = Field(alias="Bank_Account")
    combat: CombatStatistics = Field(alias="Combat")
    crime: CrimeStatistics = Field(alias="Crime")
    smuggling: SmugglingStatistics = Field(alias="Smuggling")
    trading: TradingStatistics = Field(alias="Trading")
    mining: MiningStatistics = Field(alias="Mining")
    exploration: ExplorationStatistics = Field(alias="Exploration")
    passengers: PassengersStatistics = Field(alias="Passengers")
    search_and_rescue: SearchAndRescueStatistics = Field(alias="Search_And_Rescue")
    crafting: CraftingStatistics = Field(alias="Crafting")
    crew: CrewStatistics = Field(alias="Crew")
    multicrew: MulticrewStatistics = Field(alias="Multicrew")


# =============================================================================
# Chat
# =============================================================================


class ReceiveText(TimestampedEvent):
    """A text message received from another player or an NPC."""

    event: Literal["ReceiveText"] = "ReceiveText"
    from_: str = Field(alias="From")
    from_localised: str | None = Field(default=None, alias="From_Localised")
    message: str = Field(alias="Message")
    message_localised: str | None = Field(default=None, alias="Message_Localised")
    channel: Channel = Field(alias="Channel")


class SendText(TimestampedEvent):
    """A text message sent by the player."""

    event: Literal["SendText"] = "SendText"
    to: str = Field(alias="To")
    message: str = Field(alias="Message")


# =============================================================================
# Snapshots
# =============================================================================


class Status(TimestampedEvent):
    """The contents of Status.json, rewritten by the game several times a second.

    In the main menu the game writes only Flags, so everything else is optional.
    """

    event: Literal["Status"] = "Status"
    flags: int = Field(alias="Flags", description="Bit field of ship state flags")
    flags2: int = Field(default=0, alias="Flags2", description="Bit field of on-foot state flags")
    pips: tuple[int, int, int] | None = Field(
        default=None,
        alias="Pips",
        description="Half-pips in systems, engines, weapons",
    )
    fire_group: NonNegativeInt | None = Field(default=None, alias="FireGroup")
    gui_focus: NonNegativeInt = Field(default=0, alias="GuiFocus")
    fuel: StatusFuel | None = Field(default=None, alias="Fuel")
    cargo: float | None = Field(default=None, alias="Cargo")
    legal_state: str | None = Field(default=None, alias="LegalState")
    balance: int | None = Field(default=None, alias="Balance")


# =============================================================================
# Bare events
# =============================================================================


class BareEventName(StrEnum):
    """Every known event whose fields are not modeled.

    Values are the wire tags, spelled exactly as the game writes them.
    """

    # Travel
    APPROACH_BODY = "ApproachBody"
    DOCKED = "Docked"
    DOCKING_CANCELLED = "DockingCancelled"
    DOCKING_DENIED = "DockingDenied"
    DOCKING_GRANTED = "DockingGranted"
    DOCKING_REQUESTED = "DockingRequested"
    DOCKING_TIMEOUT = "DockingTimeout"
    FSD_JUMP = "FSDJump"
    FSD_TARGET = "FSDTarget"
    LEAVE_BODY = "LeaveBody"
    LIFTOFF = "Liftoff"
    LOCATION = "Location"
    START_JUMP = "StartJump"
    SUPERCRUISE_ENTRY = "SupercruiseEntry"
    SUPERCRUISE_EXIT = "SupercruiseExit"
    TOUCHDOWN = "Touchdown"
    UNDOCKED = "Undocked"
    NAV_ROUTE = "NavRoute"
    NAV_ROUTE_CLEAR = "NavRouteClear"

    # Combat
    BOUNTY = "Bounty"
    CAP_SHIP_BOND = "CapShipBond"
    DIED = "Died"
    ESCAPE_INTERDICTION = "EscapeInterdiction"
    FACTION_KILL_BOND = "FactionKillBond"
    FIGHTER_DESTROYED = "FighterDestroyed"
    HEAT_DAMAGE = "HeatDamage"
    HEAT_WARNING = "HeatWarning"
    HULL_DAMAGE = "HullDamage"
    INTERDICTED = "Interdicted"
    INTERDICTION = "Interdiction"
    PVP_KILL = "PVPKill"
    SHIELD_STATE = "ShieldState"
    SHIP_TARGETED = "ShipTargeted"
    SRV_DESTROYED = "SRVDestroyed"
    UNDER_ATTACK = "UnderAttack"

    # Exploration
    CODEX_ENTRY = "CodexEntry"
    DISCOVERY_SCAN = "DiscoveryScan"
    SCAN = "Scan"
    FSS_ALL_BODIES_FOUND = "FSSAllBodiesFound"
    FSS_BODY_SIGNALS = "FSSBodySignals"
    FSS_DISCOVERY_SCAN = "FSSDiscoveryScan"
    FSS_SIGNAL_DISCOVERED = "FSSSignalDiscovered"
    MATERIAL_COLLECTED = "MaterialCollected"
    MATERIAL_DISCARDED = "MaterialDiscarded"
    MATERIAL_DISCOVERED = "MaterialDiscovered"
    MULTI_SELL_EXPLORATION_DATA = "MultiSellExplorationData"
    NAV_BEACON_SCAN = "NavBeaconScan"
    BUY_EXPLORATION_DATA = "BuyExplorationData"
    SAA_SCAN_COMPLETE = "SAAScanComplete"
    SAA_SIGNALS_FOUND = "SAASignalsFound"
    SCAN_BARY_CENTRE = "ScanBaryCentre"
    SELL_EXPLORATION_DATA = "SellExplorationData"
    SCREENSHOT = "Screenshot"

    # Trade
    ASTEROID_CRACKED = "AsteroidCracked"
    BUY_TRADE_DATA = "BuyTradeData"
    COLLECT_CARGO = "CollectCargo"
    EJECT_CARGO = "EjectCargo"
    MARKET_BUY = "MarketBuy"
    MARKET_SELL = "MarketSell"
    MINING_REFINED = "MiningRefined"

    # Station services
    BUY_AMMO = "BuyAmmo"
    BUY_DRONES = "BuyDrones"
    CARGO_DEPOT = "CargoDepot"
    COMMUNITY_GOAL = "CommunityGoal"
    COMMUNITY_GOAL_DISCARD = "CommunityGoalDiscard"
    COMMUNITY_GOAL_JOIN = "CommunityGoalJoin"
    COMMUNITY_GOAL_REWARD = "CommunityGoalReward"
    CREW_ASSIGN = "CrewAssign"
    CREW_FIRE = "CrewFire"
    CREW_HIRE = "CrewHire"
    ENGINEER_APPLY = "EngineerApply"
    ENGINEER_CONTRIBUTION = "EngineerContribution"
    ENGINEER_CRAFT = "EngineerCraft"
    ENGINEER_LEGACY_CONVERT = "EngineerLegacyConvert"
    ENGINEER_PROGRESS = "EngineerProgress"
    FETCH_REMOTE_MODULE = "FetchRemoteModule"
    MARKET = "Market"
    MASS_MODULE_STORE = "MassModuleStore"
    MATERIAL_TRADE = "MaterialTrade"
    MISSION_ABANDONED = "MissionAbandoned"
    MISSION_ACCEPTED = "MissionAccepted"
    MISSION_COMPLETED = "MissionCompleted"
    MISSION_FAILED = "MissionFailed"
    MISSION_REDIRECTED = "MissionRedirected"
    MODULE_BUY = "ModuleBuy"
    MODULE_RETRIEVE = "ModuleRetrieve"
    MODULE_SELL = "ModuleSell"
    MODULE_SELL_REMOTE = "ModuleSellRemote"
    MODULE_STORE = "ModuleStore"
    MODULE_SWAP = "ModuleSwap"
    OUTFITTING = "Outfitting"
    PAY_BOUNTIES = "PayBounties"
    PAY_FINES = "PayFines"
    PAY_LEGACY_FINES = "PayLegacyFines"
    REDEEM_VOUCHER = "RedeemVoucher"
    REFUEL_ALL = "RefuelAll"
    REFUEL_PARTIAL = "RefuelPartial"
    REPAIR = "Repair"
    REPAIR_ALL = "RepairAll"
    RESTOCK_VEHICLE = "RestockVehicle"
    SCIENTIFIC_RESEARCH = "ScientificResearch"
    SEARCH_AND_RESCUE = "SearchAndRescue"
    SELL_DRONES = "SellDrones"
    SELL_SHIP_ON_REBUY = "SellShipOnRebuy"
    SET_USER_SHIP_NAME = "SetUserShipName"
    SHIPYARD = "Shipyard"
    SHIPYARD_BUY = "ShipyardBuy"
    SHIPYARD_NEW = "ShipyardNew"
    SHIPYARD_SELL = "ShipyardSell"
    SHIPYARD_TRANSFER = "ShipyardTransfer"
    SHIPYARD_SWAP = "ShipyardSwap"
    STORED_MODULES = "StoredModules"
    STORED_SHIPS = "StoredShips"
    TECHNOLOGY_BROKER = "TechnologyBroker"
    CLEAR_IMPOUND = "ClearImpound"

    # Powerplay
    POWERPLAY_COLLECT = "PowerplayCollect"
    POWERPLAY_DEFECT = "PowerplayDefect"
    POWERPLAY_DELIVER = "PowerplayDeliver"
    POWERPLAY_FAST_TRACK = "PowerplayFastTrack"
    POWERPLAY_JOIN = "PowerplayJoin"
    POWERPLAY_LEAVE = "PowerplayLeave"
    POWERPLAY_SALARY = "PowerplaySalary"
    POWERPLAY_VOTE = "PowerplayVote"
    POWERPLAY_VOUCHER = "PowerplayVoucher"

    # Squadrons
    APPLIED_TO_SQUADRON = "AppliedToSquadron"
    DISBANDED_SQUADRON = "DisbandedSquadron"
    INVITED_TO_SQUADRON = "InvitedToSquadron"
    JOINED_SQUADRON = "JoinedSquadron"
    KICKED_FROM_SQUADRON = "KickedFromSquadron"
    LEFT_SQUADRON = "LeftSquadron"
    SHARED_BOOKMARK_TO_SQUADRON = "SharedBookmarkToSquadron"
    SQUADRON_CREATED = "SquadronCreated"
    SQUADRON_DEMOTION = "SquadronDemotion"
    SQUADRON_PROMOTION = "SquadronPromotion"
    SQUADRON_STARTUP = "SquadronStartup"
    WON_A_TROPHY_FOR_SQUADRON = "WonATrophyForSquadron"

    # Fleet carriers
    CARRIER_JUMP = "CarrierJump"
    CARRIER_BUY = "CarrierBuy"
    CARRIER_STATS = "CarrierStats"
    CARRIER_JUMP_REQUEST = "CarrierJumpRequest"
    CARRIER_DECOMMISSION = "CarrierDecommission"
    CARRIER_CANCEL_DECOMMISSION = "CarrierCancelDecommission"
    CARRIER_BANK_TRANSFER = "CarrierBankTransfer"
    CARRIER_DEPOSIT_FUEL = "CarrierDepositFuel"
    CARRIER_CREW_SERVICES = "CarrierCrewServices"
    CARRIER_FINANCE = "CarrierFinance"
    CARRIER_SHIP_PACK = "CarrierShipPack"
    CARRIER_MODULE_PACK = "CarrierModulePack"
    CARRIER_TRADE_ORDER = "CarrierTradeOrder"
    CARRIER_DOCKING_PERMISSION = "CarrierDockingPermission"
    CARRIER_NAME_CHANGED = "CarrierNameChanged"
    CARRIER_JUMP_CANCELLED = "CarrierJumpCancelled"

    # Odyssey
    BACKPACK = "Backpack"
    BACKPACK_CHANGE = "BackpackChange"
    BACKPACK_MATERIALS = "BackpackMaterials"
    BOOK_DROPSHIP = "BookDropship"
    BOOK_TAXI = "BookTaxi"
    BUY_MICRO_RESOURCES = "BuyMicroResources"
    BUY_SUIT = "BuySuit"
    BUY_WEAPON = "BuyWeapon"
    CANCEL_DROPSHIP = "CancelDropship"
    CANCEL_TAXI = "CancelTaxi"
    COLLECT_ITEMS = "CollectItems"
    CREATE_SUIT_LOADOUT = "CreateSuitLoadout"
    DELETE_SUIT_LOADOUT = "DeleteSuitLoadout"
    DISEMBARK = "Disembark"
    DROP_ITEMS = "DropItems"
    DROP_SHIP_DEPLOY = "DropShipDeploy"
    EMBARK = "Embark"
    FC_MATERIALS = "FCMaterials"
    LOADOUT_EQUIP_MODULE = "LoadoutEquipModule"
    LOADOUT_REMOVE_MODULE = "LoadoutRemoveModule"
    RENAME_SUIT_LOADOUT = "RenameSuitLoadout"
    RESUPPLY = "Resupply"
    SCAN_ORGANIC = "ScanOrganic"
    SELL_MICRO_RESOURCES = "SellMicroResources"
    SELL_ORGANIC_DATA = "SellOrganicData"
    SELL_SUIT = "SellSuit"
    SELL_WEAPON = "SellWeapon"
    SHIP_LOCKER = "ShipLocker"
    SUIT_LOADOUT = "SuitLoadout"
    SWITCH_SUIT_LOADOUT = "SwitchSuitLoadout"
    TRANSFER_MICRO_RESOURCES = "TransferMicroResources"
    TRADE_MICRO_RESOURCES = "TradeMicroResources"
    UPGRADE_SUIT = "UpgradeSuit"
    UPGRADE_WEAPON = "UpgradeWeapon"
    USE_CONSUMABLE = "UseConsumable"

    # Other
    AFMU_REPAIRS = "AfmuRepairs"
    APPROACH_SETTLEMENT = "ApproachSettlement"
    CHANGE_CREW_ROLE = "ChangeCrewRole"
    COCKPIT_BREACHED = "CockpitBreached"
    COMMIT_CRIME = "CommitCrime"
    CONTINUED = "Continued"
    CREW_LAUNCH_FIGHTER = "CrewLaunchFighter"
    CREW_MEMBER_JOINS = "CrewMemberJoins"
    CREW_MEMBER_QUITS = "CrewMemberQuits"
    CREW_MEMBER_ROLE_CHANGE = "CrewMemberRoleChange"
    CRIME_VICTIM = "CrimeVictim"
    DATALINK_SCAN = "DatalinkScan"
    DATALINK_VOUCHER = "DatalinkVoucher"
    DATA_SCANNED = "DataScanned"
    DOCK_FIGHTER = "DockFighter"
    DOCK_SRV = "DockSRV"
    END_CREW_SESSION = "EndCrewSession"
    FIGHTER_REBUILT = "FighterRebuilt"
    FUEL_SCOOP = "FuelScoop"
    FRIENDS = "Friends"
    JET_CONE_BOOST = "JetConeBoost"
    JET_CONE_DAMAGE = "JetConeDamage"
    JOIN_A_CREW = "JoinACrew"
    KICK_CREW_MEMBER = "KickCrewMember"
    LAUNCH_DRONE = "LaunchDrone"
    LAUNCH_FIGHTER = "LaunchFighter"
    LAUNCH_SRV = "LaunchSRV"
    MODULE_INFO = "ModuleInfo"
    MUSIC = "Music"
    NPC_CREW_PAID_WAGE = "NpcCrewPaidWage"
    NPC_CREW_RANK = "NpcCrewRank"
    PROMOTION = "Promotion"
    PROSPECTED_ASTEROID = "ProspectedAsteroid"
    QUIT_A_CREW = "QuitACrew"
    REBOOT_REPAIR = "RebootRepair"
    REPAIR_DRONE = "RepairDrone"
    RESERVOIR_REPLENISHED = "ReservoirReplenished"
    RESURRECT = "Resurrect"
    SCANNED = "Scanned"
    SELF_DESTRUCT = "SelfDestruct"
    SHUTDOWN = "Shutdown"
    SYNTHESIS = "Synthesis"
    SYSTEMS_SHUTDOWN = "SystemsShutdown"
    USS_DROP = "USSDrop"
    VEHICLE_SWITCH = "VehicleSwitch"
    WING_ADD = "WingAdd"
    WING_INVITE = "WingInvite"
    WING_JOIN = "WingJoin"
    WING_LEAVE = "WingLeave"
    CARGO_TRANSFER = "CargoTransfer"
    SUPERCRUISE_DESTINATION_DROP = "SupercruiseDestinationDrop"


class BareEvent(JournalEventBase):
    """A known event whose fields are not modeled.

    The game always writes a timestamp, but a bare event decodes from its tag
    alone, so the timestamp is kept only when present.
    """

    event: BareEventName
    timestamp: AwareDatetime | None = Field(default=None, description="When the game wrote the event")


JournalEvent = (
    Fileheader
    | Cargo
    | ClearSavedGame
    | Commander
    | Loadout
    | Materials
    | Missions
    | NewCommander
    | LoadGame
    | Passengers
    | Powerplay
    | Progress
    | Rank
    | Reputation
    | Statistics
    | ReceiveText
    | SendText
    | Status
    | BareEvent
)

PAYLOAD_EVENT_CLASSES: Final[tuple[type[TimestampedEvent], ...]] = (
    Fileheader,
    Cargo,
    ClearSavedGame,
    Commander,
    Loadout,
    Materials,
    Missions,
    NewCommander,
    LoadGame,
    Passengers,
    Powerplay,
    Progress,
    Rank,
    Reputation,
    Statistics,
    ReceiveText,
    SendText,
    Status,
)


def _build_event_class_by_name() -> Mapping[str, type[JournalEventBase]]:
    event_class_by_name: dict[str, type[JournalEventBase]] = {}
    for event_class in PAYLOAD_EVENT_CLASSES:
        event_name = event_class.model_fields["event"].default
        if event_name in event_class_by_name:
            raise DuplicateEventNameError(f"Event tag {event_name!r} is claimed by more than one model")
        event_class_by_name[event_name] = event_class
    for bare_event_name in BareEventName:
        if bare_event_name.value in event_class_by_name:
            raise DuplicateEventNameError(f"Event tag {bare_event_name.value!r} is both bare and modeled")
        event_class_by_name[bare_event_name.value] = BareEvent
    return MappingProxyType(event_class_by_name)


EVENT_CLASS_BY_NAME: Final[Mapping[str, type[JournalEventBase]]] = _build_event_class_by_name()

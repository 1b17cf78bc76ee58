"""
Activity codes for a service location.

See https://wiki.openraildata.com/index.php?title=Activity_codes
"""

from enum import Enum


class Activity(str, Enum):
    """An operational activity at a location. Values are the CIF activity codes."""
    STOP_DETACH = "-D"
    STOP_ATTACH_DETACH = "-T"
    STOP_ATTACH = "-U"
    STOP_OR_SHUNT_FOR_PASS = "A"
    ATTACH_OR_DETACH_ASSISTING_LOCOMOTIVE = "AE"
    SHOWS_AS_X_ON_ARRIVAL = "AX"
    STOPS_FOR_BANKING_LOCOMOTIVE = "BL"
    STOPS_TO_CHANGE_CREW = "C"
    STOPS_TO_SET_DOWN_PASSENGERS = "D"
    STOPS_FOR_EXAMINATION = "E"
    GBPRTT_DATA_TO_ADD = "G"
    NOTIONAL = "H"
    NOTIONAL_THIRD_COLUMN = "HH"
    PASSENGER_COUNT_POINT = "K"
    TICKET_COLLECTION_AND_EXAMINATION_POINT = "KC"
    TICKET_EXAMINATION_POINT = "KE"
    TICKET_EXAMINATION_POINT_FIRST_CLASS = "KF"
    SELECTIVE_TICKET_EXAMINATION_POINT = "KS"
    STOPS_TO_CHANGE_LOCOMOTIVE = "L"
    STOP_NOT_ADVERTISED = "N"
    STOPS_FOR_OTHER_REASONS = "OP"
    TRAIN_LOCOMOTIVE_ON_REAR = "OR"
    PROPELLING_BETWEEN_POINTS_SHOWN = "PR"
    STOPS_WHEN_REQUIRED = "R"
    STOPS_FOR_REVERSING_MOVE = "RM"
    STOPS_FOR_LOCOMOTIVE_TO_RUN_ROUND = "RR"
    STOPS_FOR_RAILWAY_PERSONNEL = "S"
    STOPS_TO_TAKE_UP_AND_SET_DOWN_PASSENGERS = "T"
    TRAIN_BEGINS = "TB"
    TRAIN_FINISHES = "TF"
    REQUESTED_FOR_TOPS = "TS"
    STOPS_OR_PASSES_FOR_TABLET_STAFF_OR_TOKEN = "TW"
    STOPS_TO_TAKE_UP_PASSENGERS = "U"
    STOPS_FOR_WATERING_OF_COACHES = "W"
    PASSES_ANOTHER_TRAIN = "X"
    NONE = ""

    @property
    def description(self) -> str:
        return ACTIVITY_DESCRIPTIONS[self]


ACTIVITY_DESCRIPTIONS = {
    Activity.STOP_DETACH: "Stops to detach vehicles",
    Activity.STOP_ATTACH_DETACH: "Stops to attach and detach vehicles",
    Activity.STOP_ATTACH: "Stops to attach vehicles",
    Activity.STOP_OR_SHUNT_FOR_PASS: "Stops or shunts for other trains to pass",
    Activity.ATTACH_OR_DETACH_ASSISTING_LOCOMOTIVE: "Attaches or detaches an assisting locomotive",
    Activity.SHOWS_AS_X_ON_ARRIVAL: "Shows as 'X' on arrival",
    Activity.STOPS_FOR_BANKING_LOCOMOTIVE: "Stops for banking locomotive",
    Activity.STOPS_TO_CHANGE_CREW: "Stops to change train crew",
    Activity.STOPS_TO_SET_DOWN_PASSENGERS: "Stops to set down passengers",
    Activity.STOPS_FOR_EXAMINATION: "Stops for examination",
    Activity.GBPRTT_DATA_TO_ADD: "GBPRTT data to add",
    Activity.NOTIONAL: "Notional activity to prevent WTT columns merge",
    Activity.NOTIONAL_THIRD_COLUMN: "Notional activity to prevent WTT columns merge, where a third column is involved",
    Activity.PASSENGER_COUNT_POINT: "Passenger count point",
    Activity.TICKET_COLLECTION_AND_EXAMINATION_POINT: "Ticket collection and examination point",
    Activity.TICKET_EXAMINATION_POINT: "Ticket examination point",
    Activity.TICKET_EXAMINATION_POINT_FIRST_CLASS: "Ticket examination point, first class only",
    Activity.SELECTIVE_TICKET_EXAMINATION_POINT: "Selective ticket examination point",
    Activity.STOPS_TO_CHANGE_LOCOMOTIVE: "Stops to change locomotive",
    Activity.STOP_NOT_ADVERTISED: "Stop not advertised",
    Activity.STOPS_FOR_OTHER_REASONS: "Stops for other operating reasons",
    Activity.TRAIN_LOCOMOTIVE_ON_REAR: "Train locomotive on rear",
    Activity.PROPELLING_BETWEEN_POINTS_SHOWN: "Propelling between points shown",
    Activity.STOPS_WHEN_REQUIRED: "Stops when required",
    Activity.STOPS_FOR_REVERSING_MOVE: "Stops for reversing move or when the driver changes ends",
    Activity.STOPS_FOR_LOCOMOTIVE_TO_RUN_ROUND: "Stops for locomotive to run round train",
    Activity.STOPS_FOR_RAILWAY_PERSONNEL: "Stops for railway personnel only",
    Activity.STOPS_TO_TAKE_UP_AND_SET_DOWN_PASSENGERS: "Stops to take up and set down passengers",
    Activity.TRAIN_BEGINS: "Train begins",
    Activity.TRAIN_FINISHES: "Train finishes",
    Activity.REQUESTED_FOR_TOPS: "Activity requested for TOPS reporting purposes",
    Activity.STOPS_OR_PASSES_FOR_TABLET_STAFF_OR_TOKEN: "Stops or passes for tablet, staff or token",
    Activity.STOPS_TO_TAKE_UP_PASSENGERS: "Stops to take up passengers",
    Activity.STOPS_FOR_WATERING_OF_COACHES: "Stops for watering of coaches",
    Activity.PASSES_ANOTHER_TRAIN: "Passes another train at crossing point on a single line",
    Activity.NONE: "No activity",
}

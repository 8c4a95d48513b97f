from enum import Enum


class ReminderType(str, Enum):
    DEPOSIT = "DEPOSIT"
    BALANCE = "BALANCE"
    OVERDUE = "OVERDUE"

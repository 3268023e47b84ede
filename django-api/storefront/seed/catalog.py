"""Fixed seed catalog of campaign windows.

Rows keep the source spreadsheet's formats: DD/MM/YY(YY) dates, "HH:MM-HH:MM"
times where an end of "00:00" means midnight at the end of the day, and
currency-formatted prices.
"""

SEED_VERSION = "2025.03-r2"

SEED_DATA = (
    {"campaign": "BRIGHTON", "date": "07/03/25", "time": "07:00-10:00", "slotsAvailable": "12", "advertsPerSlot": "6", "pricePerSlot": "£95.00"},
    {"campaign": "BRIGHTON", "date": "07/03/25", "time": "16:00-19:00", "slotsAvailable": "12", "advertsPerSlot": "6", "pricePerSlot": "£110.00"},
    {"campaign": "BRIGHTON", "date": "07/03/25", "time": "20:00-00:00", "slotsAvailable": "10", "advertsPerSlot": "8", "pricePerSlot": "£135.50"},
    {"campaign": "BRIGHTON", "date": "08/03/25", "time": "10:00-14:00", "slotsAvailable": "15", "advertsPerSlot": "6", "pricePerSlot": "£120.00"},
    {"campaign": "BRIGHTON", "date": "08/03/25", "time": "20:00-00:00", "slotsAvailable": "10", "advertsPerSlot": "8", "pricePerSlot": "£150.00"},
    {"campaign": "BRIGHTON", "date": "14/03/2025", "time": "07:00-10:00", "slotsAvailable": "12", "advertsPerSlot": "6", "pricePerSlot": "£95.00"},
    {"campaign": "BRIGHTON", "date": "14/03/2025", "time": "16:00-19:00", "slotsAvailable": "12", "advertsPerSlot": "6", "pricePerSlot": "£110.00"},
    {"campaign": "BRIGHTON", "date": "15/03/2025", "time": "10:00-14:00", "slotsAvailable": "15", "advertsPerSlot": "6", "pricePerSlot": "£120.00"},
    {"campaign": "BRIGHTON", "date": "15/03/2025", "time": "20:00-00:00", "slotsAvailable": "10", "advertsPerSlot": "8", "pricePerSlot": "£1,150.00"},
    {"campaign": "BRIGHTON", "date": "22/03/25", "time": "20:00-00:00", "slotsAvailable": "10", "advertsPerSlot": "8", "pricePerSlot": "£150.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "07/03/25", "time": "07:00-10:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£65.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "07/03/25", "time": "16:00-19:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£75.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "08/03/25", "time": "10:00-14:00", "slotsAvailable": "10", "advertsPerSlot": "4", "pricePerSlot": "£70.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "08/03/25", "time": "18:00-22:00", "slotsAvailable": "8", "advertsPerSlot": "5", "pricePerSlot": "£85.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "14/03/25", "time": "07:00-10:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£65.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "14/03/25", "time": "16:00-19:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£75.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "15/03/25", "time": "18:00-22:00", "slotsAvailable": "8", "advertsPerSlot": "5", "pricePerSlot": "£85.00"},
    {"campaign": "TONBRIDGE/TUNBRIDGE WELLS", "date": "21/03/25", "time": "16:00-19:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£75.00"},
    {"campaign": "MAIDSTONE", "date": "07/03/25", "time": "07:00-10:00", "slotsAvailable": "10", "advertsPerSlot": "5", "pricePerSlot": "£70.00"},
    {"campaign": "MAIDSTONE", "date": "07/03/25", "time": "12:00-15:00", "slotsAvailable": "10", "advertsPerSlot": "5", "pricePerSlot": "£60.00"},
    {"campaign": "MAIDSTONE", "date": "07/03/25", "time": "16:00-19:00", "slotsAvailable": "10", "advertsPerSlot": "5", "pricePerSlot": "£80.00"},
    {"campaign": "MAIDSTONE", "date": "08/03/25", "time": "10:00-14:00", "slotsAvailable": "12", "advertsPerSlot": "5", "pricePerSlot": "£75.00"},
    {"campaign": "MAIDSTONE", "date": "08/03/25", "time": "20:00-00:00", "slotsAvailable": "8", "advertsPerSlot": "6", "pricePerSlot": "£99.99"},
    {"campaign": "MAIDSTONE", "date": "14/03/25", "time": "07:00-10:00", "slotsAvailable": "10", "advertsPerSlot": "5", "pricePerSlot": "£70.00"},
    {"campaign": "MAIDSTONE", "date": "14/03/25", "time": "16:00-19:00", "slotsAvailable": "10", "advertsPerSlot": "5", "pricePerSlot": "£80.00"},
    {"campaign": "MAIDSTONE", "date": "15/03/25", "time": "20:00-00:00", "slotsAvailable": "8", "advertsPerSlot": "6", "pricePerSlot": "£99.99"},
    {"campaign": "MAIDSTONE", "date": "22/03/25", "time": "10:00-14:00", "slotsAvailable": "12", "advertsPerSlot": "5", "pricePerSlot": "£75.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "07/03/25", "time": "07:00-10:00", "slotsAvailable": "6", "advertsPerSlot": "4", "pricePerSlot": "£55.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "07/03/25", "time": "16:00-19:00", "slotsAvailable": "6", "advertsPerSlot": "4", "pricePerSlot": "£60.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "08/03/25", "time": "10:00-14:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£58.50"},
    {"campaign": "HASTINGS/BEXHILL", "date": "08/03/25", "time": "20:00-00:00", "slotsAvailable": "6", "advertsPerSlot": "5", "pricePerSlot": "£72.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "14/03/25", "time": "07:00-10:00", "slotsAvailable": "6", "advertsPerSlot": "4", "pricePerSlot": "£55.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "15/03/25", "time": "10:00-14:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£58.50"},
    {"campaign": "HASTINGS/BEXHILL", "date": "15/03/25", "time": "20:00-00:00", "slotsAvailable": "6", "advertsPerSlot": "5", "pricePerSlot": "£72.00"},
    {"campaign": "HASTINGS/BEXHILL", "date": "22/03/25", "time": "16:00-19:00", "slotsAvailable": "6", "advertsPerSlot": "4", "pricePerSlot": "£60.00"},
    {"campaign": "EASTBOURNE", "date": "07/03/25", "time": "07:00-10:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£60.00"},
    {"campaign": "EASTBOURNE", "date": "07/03/25", "time": "12:00-15:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£50.00"},
    {"campaign": "EASTBOURNE", "date": "07/03/25", "time": "16:00-19:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£65.00"},
    {"campaign": "EASTBOURNE", "date": "08/03/25", "time": "10:00-14:00", "slotsAvailable": "10", "advertsPerSlot": "4", "pricePerSlot": "£62.50"},
    {"campaign": "EASTBOURNE", "date": "08/03/25", "time": "20:00-00:00", "slotsAvailable": "6", "advertsPerSlot": "5", "pricePerSlot": "£78.00"},
    {"campaign": "EASTBOURNE", "date": "14/03/25", "time": "07:00-10:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£60.00"},
    {"campaign": "EASTBOURNE", "date": "14/03/25", "time": "16:00-19:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£65.00"},
    {"campaign": "EASTBOURNE", "date": "15/03/25", "time": "20:00-00:00", "slotsAvailable": "6", "advertsPerSlot": "5", "pricePerSlot": "£78.00"},
    {"campaign": "EASTBOURNE", "date": "21/03/25", "time": "12:00-15:00", "slotsAvailable": "8", "advertsPerSlot": "4", "pricePerSlot": "£50.00"},
)

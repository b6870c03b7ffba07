"""Constants for Device model field names"""


class DeviceFields:
    """Field name constants for Device model"""
    ID = "id"
    SERIAL_NUMBER = "serial_number"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

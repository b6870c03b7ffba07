"""Constants for Ownership link field names"""


class OwnershipFields:
    """Field name constants for the user/device ownership collection"""
    USER_ID = "user_id"
    DEVICE_ID = "device_id"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"

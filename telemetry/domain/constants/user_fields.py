"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

class EventFields:
    """MongoDB field names for device_events collection"""

    MONGO_ID = "_id"

    DEVICE_ID = "device_id"

    MAC_ADDRESS = "mac_address"
    IP_ADDRESS = "ip_address"

    SOIL_MOISTURE = "soil_moisture"
    HUMIDITY = "humidity"
    TEMPERATURE = "temperature"
    LIGHT_INTENSITY = "light_intensity"

    HAPPENED_AT = "happened_at"
    CREATED_AT = "created_at"

from ..constants import CONF_ENABLE_ORP, CONF_ENABLE_PH
from .base import ChemistrySensorDefinition

# pH and ORP; the value attribute prefers the SpaBoy probe reading
CHEMISTRY_SENSORS = [
    ChemistrySensorDefinition(
        key="ph",
        name="pH",
        translation_key="ph",
        status_key="ph_status",
        enable_option=CONF_ENABLE_PH,
        device_class="ph",
    ),
    ChemistrySensorDefinition(
        key="orp",
        name="ORP",
        translation_key="orp",
        status_key="orp_status",
        enable_option=CONF_ENABLE_ORP,
        unit="mV",
    ),
]

from .base import PumpDefinition

PUMPS = [
    PumpDefinition(key="pump1", name="Pump 1", translation_key="pump1", pump="1"),
    PumpDefinition(key="pump2", name="Pump 2", translation_key="pump2", pump="2"),
    PumpDefinition(key="pump3", name="Pump 3", translation_key="pump3", pump="3"),
    PumpDefinition(key="pump4", name="Pump 4", translation_key="pump4", pump="4"),
    PumpDefinition(key="pump5", name="Pump 5", translation_key="pump5", pump="5"),
]

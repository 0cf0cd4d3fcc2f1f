from .base import SwitchDefinition

SWITCHES = [
    SwitchDefinition(key="blower1", name="Blower 1", translation_key="blower1", kind="blower", selector="1"),
    SwitchDefinition(key="blower2", name="Blower 2", translation_key="blower2", kind="blower", selector="2"),
    SwitchDefinition(key="easymode", name="Easy Mode", translation_key="easymode", kind="toggle", selector="easymode"),
    SwitchDefinition(key="sds", name="SDS", translation_key="sds", kind="toggle", selector="sds"),
    SwitchDefinition(key="yess", name="YESS", translation_key="yess", kind="toggle", selector="yess"),
    SwitchDefinition(key="fogger", name="Fogger", translation_key="fogger", kind="toggle", selector="fogger"),
]

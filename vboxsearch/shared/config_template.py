default_config = {
    "_section_hint": (
        "Settings for the VirtualBox search provider for GNOME Shell."
    ),
    "dbus": {
        "_section_hint": "Where the provider is exported on the session bus.",
        "bus_name": "io.github.vboxsearch.SearchProvider",
        "bus_name_hint": (
            "Well-known bus name. Must match BusName in the installed "
            "search provider .ini file."
        ),
        "object_path": "/io/github/vboxsearch/SearchProvider",
        "object_path_hint": (
            "Object path. Must match ObjectPath in the installed "
            "search provider .ini file."
        ),
    },
    "commands": {
        "_section_hint": "External commands run by the provider.",
        "list_vms": ["vboxmanage", "list", "vms"],
        "list_vms_hint": (
            "Prints one '\"<name>\" {<uuid>}' line per virtual machine."
        ),
        "start_vm": ["vboxmanage", "startvm", "{id}"],
        "start_vm_hint": (
            "Started when a result is activated. '{id}' is replaced with "
            "the machine identifier."
        ),
        "launch": ["virtualbox"],
        "launch_hint": "Started when the provider icon is clicked.",
    },
    "search": {
        "_section_hint": "How typed terms are matched against machine names.",
        "term_separator": " ",
        "term_separator_hint": (
            "Terms are joined with this string and matched as one "
            "case-insensitive substring of the machine name."
        ),
        "max_results": 0,
        "max_results_hint": "Maximum number of results, 0 for no limit.",
    },
    "results": {
        "_section_hint": "How results are presented in the search UI.",
        "name_format": "{name} VM",
        "name_format_hint": "Result title. '{name}' is the machine name.",
        "description_format": "{name} VirtualBox VM",
        "description_format_hint": "Result description.",
        "icon_names": ["virtualbox", "computer"],
        "icon_names_hint": "Themed icon names, first available wins.",
    },
    "notifications": {
        "_section_hint": "Desktop notifications for inventory errors.",
        "enabled": True,
        "app_name": "VirtualBox machines launcher",
        "icon": "virtualbox",
    },
    "logging": {
        "_section_hint": "Logging settings.",
        "level": "INFO",
        "level_hint": "One of DEBUG, INFO, WARNING, ERROR.",
    },
}

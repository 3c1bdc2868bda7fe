# SPDX-License-Identifier: MIT


class EntityType:
    ENTRY = "entry"
    SETTINGS = "settings"

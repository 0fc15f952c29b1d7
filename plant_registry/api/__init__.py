# -*- coding: utf-8 -*-

from fastapi import APIRouter

import plant_registry.api.power_plants as power_plants

router = APIRouter()
router.include_router(power_plants.router)

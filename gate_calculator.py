import math
from typing import Dict

from constant import *


def compute_gate_params(tech) -> Dict[str, float]:

    gate_params = {}
    hTransistor = tech.featureSize * MAX_TRANSISTOR_HEIGHT

    # single NMOS / PMOS (sense amp unit)
    widthNmos = MIN_NMOS_SIZE * tech.featureSize
    widthPmos = tech.pnSizeRatio * MIN_NMOS_SIZE * tech.featureSize
    nmos = CalculateGateArea(INV, widthNmos, 0, hTransistor, tech)
    pmos = CalculateGateArea(INV, 0, widthPmos, hTransistor, tech)
    gate_params['widthNmos'], gate_params['widthPmos'] = widthNmos, widthPmos
    gate_params['hNmos'], gate_params['wNmos'] = nmos['height'], nmos['width']
    gate_params['hPmos'], gate_params['wPmos'] = pmos['height'], pmos['width']

    return gate_params


def CalculateGateArea(gateType:int, widthNMOS:float, widthPMOS:float,
                      heightTransistorRegion:float, tech) -> dict:
    """Layout area of a static CMOS inverter-style gate.

    Transistors wider than the diffusion region allowed by the cell height are
    folded. Returns a dict with ``area``, ``height`` and ``width`` (m, m^2).
    """
    if gateType != INV:
        raise ValueError(f"Unknown gate type: {gateType}")

    F = tech.featureSize
    ratio = widthPMOS / (widthPMOS + widthNMOS)

    if ratio == 0:      # no PMOS
        maxWidthPMOS = 0
        maxWidthNMOS = heightTransistorRegion - (MIN_POLY_EXT_DIFF + MIN_GAP_BET_FIELD_POLY/2) * 2 * F
    elif ratio == 1:    # no NMOS
        maxWidthPMOS = heightTransistorRegion - (MIN_POLY_EXT_DIFF + MIN_GAP_BET_FIELD_POLY/2) * 2 * F
        maxWidthNMOS = 0
    else:
        maxWidthPMOS = ratio * (heightTransistorRegion - MIN_GAP_BET_P_AND_N_DIFFS * F) - (MIN_POLY_EXT_DIFF + MIN_GAP_BET_FIELD_POLY/2) * F
        maxWidthNMOS = maxWidthPMOS / ratio * (1 - ratio)

    numFoldedPMOS, numFoldedNMOS = 1, 1
    heightRegionP, heightRegionN = 0, 0
    if widthPMOS > 0:
        numFoldedPMOS = max(1, math.ceil(widthPMOS / maxWidthPMOS))
        heightRegionP = min(widthPMOS, maxWidthPMOS) + (MIN_POLY_EXT_DIFF + MIN_GAP_BET_FIELD_POLY/2) * 2 * F
    if widthNMOS > 0:
        numFoldedNMOS = max(1, math.ceil(widthNMOS / maxWidthNMOS))
        heightRegionN = min(widthNMOS, maxWidthNMOS) + (MIN_POLY_EXT_DIFF + MIN_GAP_BET_FIELD_POLY/2) * 2 * F

    pitch = (POLY_WIDTH + MIN_GAP_BET_GATE_POLY) * F
    widthRegionP = pitch * (numFoldedPMOS + 1)
    widthRegionN = pitch * (numFoldedNMOS + 1)

    width = max(widthRegionN, widthRegionP)
    if widthPMOS > 0 and widthNMOS > 0:
        height = heightTransistorRegion
    elif widthPMOS > 0:
        height = heightRegionP
    else:
        height = heightRegionN

    return {'area': height * width, 'height': height, 'width': width}

import math

import numpy as np

from constant import *
from CurrentSenseAmp import CurrentSenseAmp
from FunctionUnit import FunctionUnit, AreaConstraintError

# Bounds of the fitted region of Rref/R_BL
LOW_BOUND = 0.9
RATIO_MIN = 0.05
RATIO_MAX = 20

# LP settling-time fits, from Cadence simulation of the multilevel S/A.
# node (nm) -> T_max = (a*ln(R_BL/1k) + b) ns, cubic fit for ratio <= LOW_BOUND,
# quartic fit above it (highest power first)
SETTLING_FIT = {
    130: {
        "T_max": (0.2679, 0.0478),
        "low": np.array([3.915, -5.3996, 2.4653, 0.3856]),
        "high": np.array([0.0004, -0.0087, 0.0742, -0.2725, 1.2211]),
    },
    90: {
        "T_max": (0.0586, 1.41),
        "low": np.array([3.726, -5.651, 2.8249, 0.3574]),
        "high": np.array([0.0000008, -0.00007, 0.0017, -0.0188, 0.9835]),
    },
    65: {
        "T_max": (0.1239, 0.6642),
        "low": np.array([1.3899, -2.6913, 2.0483, 0.3202]),
        "high": np.array([0.0036, -0.0363, 0.1043, -0.0346, 1.0512]),
    },
    45: {
        "T_max": (0.0714, 0.7651),
        "low": np.array([3.7949, -5.6685, 2.6492, 0.4807]),
        "high": np.array([0.000001, -0.00006, 0.0001, -0.0171, 1.0057]),
    },
}
SETTLING_FIT[32] = SETTLING_FIT[45]

# Column read power, (slope, intercept) of (slope*ln(R_BL/1k) + intercept) uW.
# Nodes not listed fall back to 7nm.
READ_POWER_FIT = {
    HP: {
        130: (0.00001, 9.8898),
        90: (0.0002, 9.09),
        65: (0.0001, 7.9579),
        45: (0.0037, 7.7017),
        32: (0.0064, 7.9648),
        22: (0.0087, 3.1939),
        14: (0.0087, 2.2),
        10: (0.0087, 1.7),
        7: (0.0087, 1.2),
    },
    LP: {
        130: (0.2811, 7.0809),
        90: (0.0578, 7.6102),
        65: (0.0710, 6.4147),
        45: (0.0710, 6.4147),
        32: (0.0251, 4.7835),
        22: (0.0516, 2.2349),
        14: (0.0516, 1.5),
        10: (0.0516, 1.1),
        7: (0.0516, 0.7),
    },
}


def IsDisconnected(columnRes):
    """A column with zero or infinite resistance carries no read signal."""
    return columnRes == 0 or 1/columnRes == 0


class MultilevelSenseAmp(FunctionUnit):
    """Multilevel current sense amplifier: levelOutput-1 single-bit S/As per
    column compare the bitline against a ladder of reference resistances."""

    def __init__(self, param, tech, gate_params):
        super().__init__()
        self.param = param
        self.tech = tech
        self.gate_params = gate_params

        self.currentSenseAmp = CurrentSenseAmp(param, tech, gate_params)
        self.Rref = []
        self.initialized = False

    def Initialize(self, numCol, levelOutput, clkFreq, numReadCellPerOperationNeuro, parallel):
        if self.initialized:
            print("[MultilevelSenseAmp] Warning: Already initialized!")
            return
        if levelOutput < 2:
            print(f"[MultilevelSenseAmp] Error: levelOutput must be at least 2, got {levelOutput}")
            return

        self.numCol = numCol
        self.levelOutput = levelOutput     # # of bits for A/D output + 1
        self.clkFreq = clkFreq
        self.numReadCellPerOperationNeuro = numReadCellPerOperationNeuro
        self.parallel = parallel

        if parallel:
            # all rows of the subarray are read at once
            R_start = self.param.resistanceOn / self.param.numRowSubArray
            R_index = self.param.resistanceOff / self.param.numRowSubArray
        else:
            R_start = self.param.resistanceOn
            R_index = self.param.resistanceOff

        # TODO: nonlinear quantization, the ladder is linearly spaced
        self.Rref = [R_start + (i+1)*R_index/levelOutput for i in range(levelOutput-1)]

        # one S/A per reference level per column, real-traced mode
        self.currentSenseAmp.Initialize((levelOutput-1)*numCol, False, False, clkFreq, numReadCellPerOperationNeuro)

        self.initialized = True

    def CalculateArea(self, heightArray, widthArray, option=NONE):
        if not self.initialized:
            print("[MultilevelSenseAmp] Error: Require initialization first!")
            return
        if not widthArray and not heightArray:
            print("[MultilevelSenseAmp] Error: No width or height assigned for the multiSenseAmp circuit")
            raise AreaConstraintError("No width or height assigned for the multiSenseAmp circuit")

        self.area = 0
        self.height = 0
        self.width = 0

        if widthArray:
            self.currentSenseAmp.CalculateUnitArea()
            self.currentSenseAmp.CalculateArea(widthArray)
            self.area = self.currentSenseAmp.area
            self.width = widthArray
            self.height = self.area / self.width
        else:
            self.currentSenseAmp.CalculateUnitArea()
            self.currentSenseAmp.CalculateArea(heightArray)
            self.area = self.currentSenseAmp.area
            self.height = heightArray
            self.width = self.area / self.height

        # Modify layout
        self.newHeight = heightArray
        self.newWidth = widthArray
        if option == MAGIC:
            self.MagicLayout()
        elif option == OVERRIDE:
            self.OverrideLayout()

    def CalculateLatency(self, columnResistance, numColMuxed, numRead):
        if not self.initialized:
            print("[MultilevelSenseAmp] Error: Require initialization first!")
            return

        self.readLatency = 0
        LatencyCol = 0
        for res in np.ravel(columnResistance):
            T_Col = self.GetColumnLatency(res)
            if res == res:      # NaN keeps the running max
                LatencyCol = max(LatencyCol, T_Col)
            if LatencyCol < 1e-9:
                LatencyCol = 1e-9
            elif LatencyCol > 10e-9:
                LatencyCol = 10e-9

        self.readLatency += LatencyCol*numColMuxed
        self.readLatency *= numRead

    def CalculatePower(self, columnResistance, numRead):
        if not self.initialized:
            print("[MultilevelSenseAmp] Error: Require initialization first!")
            return

        # leakage of the S/A is not modeled
        self.leakage = 0
        self.readDynamicEnergy = 0
        for res in np.ravel(columnResistance):
            E_Col = self.GetColumnEnergy(res)
            if res == res:
                self.readDynamicEnergy += E_Col
        self.readDynamicEnergy *= numRead

    def PrintProperty(self, name="MultilevelSenseAmp"):
        super().PrintProperty(name)
        if self.initialized:
            print(f"Reference Resistances = {', '.join(f'{r:.1f}' for r in self.Rref)} ohm")

    def GetSettlingTimes(self, columnRes):
        """Settling time of the S/A at each reference level but the first.

        Returns None when the technology node has no LP timing fit (22nm and
        below), in which case callers assume 1ns per level.
        """
        fit = SETTLING_FIT.get(self.param.technode)
        if fit is None:
            return None

        a, b = fit["T_max"]
        T_max = (a*math.log(columnRes/1000) + b)*1e-9

        times = []
        for i in range(1, self.levelOutput-1):
            ratio = self.Rref[i]/columnRes
            if ratio >= RATIO_MAX or ratio <= RATIO_MIN:
                T = 1e-9
            elif ratio <= LOW_BOUND:
                T = T_max * float(np.polyval(fit["low"], ratio))
            else:
                # ratios in (0.9, 1.1) share the upper-range fit
                T = T_max * float(np.polyval(fit["high"], ratio))
            times.append(T)
        return times

    def GetColumnLatency(self, columnRes):
        if IsDisconnected(columnRes):
            return 0
        if self.param.deviceroadmap == HP:
            return 1e-9

        times = self.GetSettlingTimes(columnRes)
        if times is None:
            return 1e-9
        Column_Latency = 0
        for T in times:
            Column_Latency = max(Column_Latency, T)
        return Column_Latency

    def GetColumnPower(self, columnRes):
        """Static read power of one column (W)."""
        if columnRes == 0:
            return 0
        if 1/columnRes == 0:
            return 1e-6

        roadmap = HP if self.param.deviceroadmap == HP else LP
        table = READ_POWER_FIT[roadmap]
        slope, intercept = table.get(self.param.technode, table[7])
        return (slope*math.log(columnRes/1000.0) + intercept)*1e-6

    def GetColumnEnergy(self, columnRes):
        """Dynamic read energy of one column (J): read power integrated over
        the settling time of every reference level."""
        if IsDisconnected(columnRes):
            return 0

        Column_Power = self.GetColumnPower(columnRes)
        if self.param.deviceroadmap == HP:
            return Column_Power*1e-9*(self.levelOutput-1)

        times = self.GetSettlingTimes(columnRes)
        if times is None:
            return Column_Power*1e-9*(self.levelOutput-1)
        Column_Energy = 0
        for T in times:
            Column_Energy += Column_Power*T
        return Column_Energy

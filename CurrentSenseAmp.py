from constant import *
from FunctionUnit import FunctionUnit


class CurrentSenseAmp(FunctionUnit):
    """Single-bit current-mode sense amplifier, one per compared column."""

    def __init__(self, param, tech, gate_params):
        super().__init__()
        self.param = param
        self.tech = tech
        self.gate_params = gate_params
        self.initialized = False

    def Initialize(self, numCol, parallel, rowbyrow, clkFreq, numReadCellPerOperationNeuro):
        if self.initialized:
            print("[CurrentSenseAmp] Warning: Already initialized!")
            return

        self.numCol = numCol
        self.parallel = parallel
        self.rowbyrow = rowbyrow
        self.clkFreq = clkFreq
        self.numReadCellPerOperationNeuro = numReadCellPerOperationNeuro

        self.initialized = True

    def CalculateUnitArea(self):
        if not self.initialized:
            print("[CurrentSenseAmp] Error: Require initialization first!")
            return

        GP = self.gate_params
        self.areaUnit = (GP["hNmos"]*GP["wNmos"])*48 + (GP["hPmos"]*GP["wPmos"])*40

    def CalculateArea(self, widthArray):
        # S/A width is fixed by the array, height follows
        if not self.initialized:
            print("[CurrentSenseAmp] Error: Require initialization first!")
            return

        self.area = self.areaUnit * self.numCol
        self.width = widthArray
        self.height = self.area / self.width

import csv
import os


class AreaConstraintError(RuntimeError):
    """Raised when a circuit is sized without a height or width to fit into."""


class FunctionUnit:
    """Geometry and metric fields shared by every circuit block, plus the
    generic layout-adjustment and reporting routines."""

    def __init__(self):
        self.height = 0
        self.width = 0
        self.area = 0
        self.newHeight = 0
        self.newWidth = 0
        self.readLatency = 0
        self.readDynamicEnergy = 0
        self.leakage = 0

    def MagicLayout(self):
        # keep the area, squeeze into the target height (or width)
        if self.newHeight:
            self.height = self.newHeight
            self.width = self.area / self.height
        elif self.newWidth:
            self.width = self.newWidth
            self.height = self.area / self.width

    def OverrideLayout(self):
        if not self.newHeight or not self.newWidth:
            print(f"[{type(self).__name__}] Error: OverrideLayout needs both a new height and a new width")
            raise AreaConstraintError("OverrideLayout needs both a new height and a new width")
        self.height = self.newHeight
        self.width = self.newWidth
        self.area = self.height * self.width

    def PrintProperty(self, name):
        print(name)
        print(f"Area = {self.height*1e6:.3f}um x {self.width*1e6:.3f}um = {self.area*1e12:.3f}um^2")
        print("Timing:")
        print(f" - Read Latency = {self.readLatency*1e9:.3f}ns")
        print("Power:")
        print(f" - Read Dynamic Energy = {self.readDynamicEnergy*1e12:.3f}pJ")
        print(f" - Leakage Power = {self.leakage*1e6:.3f}uW")

    def SaveOutput(self, name, filename):
        """Append one row of results (um, um^2, ns, pJ, uW) to a CSV file."""
        newFile = not os.path.exists(filename)
        with open(filename, mode='a', newline='') as csvfile:
            writer = csv.writer(csvfile)
            if newFile:
                writer.writerow(["name", "height_um", "width_um", "area_um2",
                                 "readLatency_ns", "readDynamicEnergy_pJ", "leakage_uW"])
            writer.writerow([name, self.height*1e6, self.width*1e6, self.area*1e12,
                             self.readLatency*1e9, self.readDynamicEnergy*1e12,
                             self.leakage*1e6])

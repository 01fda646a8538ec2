from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Dict, Sequence
import numpy as np
@dataclass
class Vec3:
    x: float = 0.0; y: float = 0.0; z: float = 0.0
    def __add__(self, o:'Vec3')->'Vec3': return Vec3(self.x+o.x, self.y+o.y, self.z+o.z)
    def __sub__(self, o:'Vec3')->'Vec3': return Vec3(self.x-o.x, self.y-o.y, self.z-o.z)
    def __mul__(self, k:float)->'Vec3': return Vec3(self.x*k, self.y*k, self.z*k)
    __rmul__ = __mul__
    def __truediv__(self, k:float)->'Vec3': return Vec3(self.x/k, self.y/k, self.z/k)
    def __neg__(self)->'Vec3': return Vec3(-self.x, -self.y, -self.z)
    def dot(self, o:'Vec3')->float: return self.x*o.x + self.y*o.y + self.z*o.z
    def sqr_norm(self)->float: return self.dot(self)
    def norm(self)->float: return math.sqrt(self.sqr_norm())
    def normalized(self)->'Vec3':
        n=self.norm()
        return self if n<=1e-9 else self*(1.0/n)
    def limit(self, max_len:float)->'Vec3':
        n=self.norm()
        if max_len<=0 or n<=max_len: return self
        return self*(max_len/n)
    def heading(self)->float:
        """Angle of the horizontal component about the vertical (z) axis, radians."""
        return math.atan2(self.y, self.x)
    def rotated_z(self, theta:float)->'Vec3':
        c, s = math.cos(theta), math.sin(theta)
        return Vec3(self.x*c - self.y*s, self.x*s + self.y*c, self.z)
    def lerp(self, o:'Vec3', t:float)->'Vec3': return self + (o - self)*t
    def is_finite(self)->bool: return all(math.isfinite(c) for c in (self.x, self.y, self.z))
    def is_close(self, o:'Vec3', tol:float=1e-9)->bool: return (self - o).norm() <= tol
    def to_dict(self)->Dict[str,float]: return {'x':self.x,'y':self.y,'z':self.z}
    @staticmethod
    def from_dict(d:Dict[str,float])->'Vec3': return Vec3(float(d.get('x',0.0)), float(d.get('y',0.0)), float(d.get('z',0.0)))
    def to_array(self)->np.ndarray: return np.array([self.x, self.y, self.z], dtype=float)
    @staticmethod
    def from_array(a:Sequence[float])->'Vec3': return Vec3(float(a[0]), float(a[1]), float(a[2]))
    @staticmethod
    def from_any(v)->'Vec3':
        """Coerce a dict, a 3-sequence or a Vec3 into a Vec3."""
        if isinstance(v, Vec3): return v
        if isinstance(v, dict): return Vec3.from_dict(v)
        if len(v) != 3: raise ValueError(f"Expected 3 components, got {len(v)}")
        return Vec3.from_array(v)

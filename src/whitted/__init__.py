"""A recursive Whitted-style ray tracer.

This package renders scenes of spheres and planes lit by a single point light,
with support for:
- Phong shading with hard shadows
- Procedural patterns (stripes, gradients, rings, checkers)
- Mirror reflection and Snell refraction with Schlick-weighted blending
- Band-parallel rendering across worker processes

Subpackages:
    core: Vectors, matrices, transforms, colours, rays, settings and the render loop
    geometry: Canonical shapes and their local intersection formulas
    materials: Materials, patterns and Phong lighting
    scene: Objects, intersections, the world and ready-made scenes
    camera: Pinhole camera with primary ray generation
    preview: Taichi canvas, image export and Matplotlib preview
"""

__version__ = "0.1.0"

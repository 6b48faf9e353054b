import math

import numpy as np

import legendre_jax as lj

# IGRF-like Gauss coefficients (nT) of degree 2, g[n, m] and h[n, m]
g = np.array([[0.0, 0.0, 0.0], [-29404.8, -1450.9, 0.0], [-2499.6, 2982.0, 1677.0]])
h = np.array([[0.0, 0.0, 0.0], [0.0, 4652.5, 0.0], [0.0, -2991.6, -734.6]])

n_max = 2
a = 6371.2  # km
r = 7000.0  # km

ws = lj.LegendreWorkspace("schmidt", n_max)

for colatitude_deg, longitude_deg in [(30.0, 10.0), (90.0, -45.0), (150.0, 120.0)]:
    theta = math.radians(colatitude_deg)
    lon = math.radians(longitude_deg)
    dP, P = ws.derivatives(theta)

    B_r = 0.0
    B_theta = 0.0
    for n in range(1, n_max + 1):
        ratio = (a / r) ** (n + 2)
        for m in range(n + 1):
            gh = g[n, m] * math.cos(m * lon) + h[n, m] * math.sin(m * lon)
            B_r += ratio * (n + 1) * gh * P[n, m]
            B_theta -= ratio * gh * dP[n, m]

    print(f"colatitude={colatitude_deg:6.1f} longitude={longitude_deg:6.1f} B_r={B_r:10.2f} nT B_theta={B_theta:10.2f} nT")

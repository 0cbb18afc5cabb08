ORIGINAL_COLOR = "#2563eb"
TRANSFORMED_COLOR = "#dc2626"

GRID_LINE_COLOR = "#e5e7eb"
GRID_AXIS_COLOR = "#6b7280"

# Minimum half-extent of the 2D plot in world units
PLOT_MIN_EXTENT = 5.0
GRID_DIVISIONS = 10

MARKER_SIZE = 6.0

VIEW_3D_ELEV = 30
VIEW_3D_AZIM = -60

from OpenGL.GL import *
from OpenGL.GLU import *

from .geometry import Box, column_boxes, inner_wall_boxes, minimap_segments, outer_wall_boxes, to_minimap

BG_COLOR = (0.1, 0.0, 0.2, 1.0)
FLOOR_COLOR = (0.05, 0.05, 0.1)
GRID_COLOR = (0, 0.3, 0.5)
WALL_COLOR = (0, 0.05, 0.15)
WALL_EDGE_COLOR = (0, 0.8, 1)
OUTER_COLOR = (0.1, 0.1, 0.2)
OUTER_EDGE_COLOR = (0.4, 0.4, 0.8)
EXIT_COLOR = (0, 1, 1)

MINIMAP_SIZE = 200
MINIMAP_PADDING = 20


def draw_box(box: Box, height, wall_color=WALL_COLOR, edge_color=WALL_EDGE_COLOR):
    x0, x1 = box.x - box.half_x, box.x + box.half_x
    z0, z1 = box.z - box.half_z, box.z + box.half_z
    y0, y1 = 0.0, height

    glBegin(GL_QUADS)
    glColor3fv(wall_color)
    glVertex3f(x0, y0, z1); glVertex3f(x1, y0, z1); glVertex3f(x1, y1, z1); glVertex3f(x0, y1, z1)
    glVertex3f(x0, y0, z0); glVertex3f(x0, y1, z0); glVertex3f(x1, y1, z0); glVertex3f(x1, y0, z0)
    glVertex3f(x0, y1, z0); glVertex3f(x0, y1, z1); glVertex3f(x1, y1, z1); glVertex3f(x1, y1, z0)
    glVertex3f(x0, y0, z0); glVertex3f(x1, y0, z0); glVertex3f(x1, y0, z1); glVertex3f(x0, y0, z1)
    glVertex3f(x1, y0, z0); glVertex3f(x1, y1, z0); glVertex3f(x1, y1, z1); glVertex3f(x1, y0, z1)
    glVertex3f(x0, y0, z0); glVertex3f(x0, y0, z1); glVertex3f(x0, y1, z1); glVertex3f(x0, y1, z0)
    glEnd()

    glLineWidth(2)
    glBegin(GL_LINES)
    glColor3fv(edge_color)
    for y in (y0, y1):
        glVertex3f(x0, y, z0); glVertex3f(x1, y, z0)
        glVertex3f(x1, y, z0); glVertex3f(x1, y, z1)
        glVertex3f(x1, y, z1); glVertex3f(x0, y, z1)
        glVertex3f(x0, y, z1); glVertex3f(x0, y, z0)
    for x, z in ((x0, z0), (x1, z0), (x1, z1), (x0, z1)):
        glVertex3f(x, y0, z); glVertex3f(x, y1, z)
    glEnd()


def setup_3d(width, height, fov):
    glViewport(0, 0, width, height)

    glEnable(GL_DEPTH_TEST)
    glEnable(GL_FOG)
    glClearColor(*BG_COLOR)
    glFogfv(GL_FOG_COLOR, BG_COLOR)
    glFogf(GL_FOG_DENSITY, 0.05)
    glHint(GL_FOG_HINT, GL_NICEST)

    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    if height == 0: height = 1 # Prevent div by zero
    gluPerspective(fov, (width / height), 0.05, 150.0)
    glMatrixMode(GL_MODELVIEW)


def apply_view(player):
    pos = player.position
    front = player.front
    up = player.up
    glLoadIdentity()
    gluLookAt(pos.x, pos.y, pos.z,
              pos.x + front.x, pos.y + front.y, pos.z + front.z,
              up.x, up.y, up.z)


def build_maze_list(grid, metrics, old_list=None):
    """Compile the static maze geometry into a display list."""
    if old_list:
        glDeleteLists(old_list, 1)
    maze_list = glGenLists(1)
    glNewList(maze_list, GL_COMPILE)

    ex = metrics.extent(grid.width)
    ez = metrics.extent(grid.height)
    p = metrics.pitch

    # Floor
    glBegin(GL_QUADS)
    glColor3fv(FLOOR_COLOR)
    glVertex3f(0, 0, 0); glVertex3f(ex, 0, 0)
    glVertex3f(ex, 0, ez); glVertex3f(0, 0, ez)
    glEnd()

    # Floor grid, one line per cell boundary
    glBegin(GL_LINES)
    glColor3fv(GRID_COLOR)
    for i in range(grid.width + 1):
        glVertex3f(i * p, 0.01, 0); glVertex3f(i * p, 0.01, ez)
    for j in range(grid.height + 1):
        glVertex3f(0, 0.01, j * p); glVertex3f(ex, 0.01, j * p)
    glEnd()

    for box in inner_wall_boxes(grid, metrics):
        draw_box(box, metrics.wall_size)
    for box in column_boxes(grid, metrics):
        draw_box(box, metrics.wall_size)
    for box in outer_wall_boxes(grid, metrics):
        draw_box(box, metrics.wall_size, wall_color=OUTER_COLOR, edge_color=OUTER_EDGE_COLOR)

    glEndList()
    return maze_list


def draw_exit_marker(cell, metrics):
    size = metrics.wall_size * 0.2
    marker = Box(metrics.cell_centre(cell[0]), metrics.cell_centre(cell[1]), size, size)
    glPushMatrix()
    glTranslatef(0, metrics.wall_size / 2 - size, 0)
    draw_box(marker, size * 2, wall_color=EXIT_COLOR, edge_color=(1, 1, 1))
    glPopMatrix()


def draw_minimap(grid, player, metrics, width, height, exit_cell=None):
    glMatrixMode(GL_PROJECTION)
    glPushMatrix()
    glLoadIdentity()
    glOrtho(0, width, height, 0, -1, 1)
    glMatrixMode(GL_MODELVIEW)
    glPushMatrix()
    glLoadIdentity()

    glDisable(GL_DEPTH_TEST)
    glDisable(GL_FOG)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    # Keep the cells square inside the minimap box
    scale = MINIMAP_SIZE / max(grid.width, grid.height)
    map_w, map_h = grid.width * scale, grid.height * scale
    mx, my = width - map_w - MINIMAP_PADDING, MINIMAP_PADDING

    glColor4f(0, 0, 0, 0.7)
    glBegin(GL_QUADS)
    glVertex2f(mx, my); glVertex2f(mx + map_w, my)
    glVertex2f(mx + map_w, my + map_h); glVertex2f(mx, my + map_h)
    glEnd()

    if exit_cell is not None:
        ex, ey = exit_cell
        glColor4f(0, 1, 1, 0.7)
        glBegin(GL_QUADS)
        glVertex2f(mx + ex * scale, my + ey * scale)
        glVertex2f(mx + (ex + 1) * scale, my + ey * scale)
        glVertex2f(mx + (ex + 1) * scale, my + (ey + 1) * scale)
        glVertex2f(mx + ex * scale, my + (ey + 1) * scale)
        glEnd()

    glLineWidth(2)
    glColor4f(1, 1, 0, 0.7)
    glBegin(GL_LINES)
    for (x0, y0), (x1, y1) in minimap_segments(grid):
        glVertex2f(mx + x0 * scale, my + y0 * scale)
        glVertex2f(mx + x1 * scale, my + y1 * scale)
    glEnd()

    # Player dot
    px, py = to_minimap(player.position, grid, metrics, (mx, my, map_w, map_h))
    glColor4f(0, 1, 0, 1)
    glPointSize(7)
    glBegin(GL_POINTS)
    glVertex2f(px, py)
    glEnd()

    glDisable(GL_BLEND)
    glEnable(GL_DEPTH_TEST)
    glEnable(GL_FOG)

    glMatrixMode(GL_PROJECTION)
    glPopMatrix()
    glMatrixMode(GL_MODELVIEW)
    glPopMatrix()

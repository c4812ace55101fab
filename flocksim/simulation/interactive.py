"""
Interactive 3D viewer with pygame.

The viewer is only a caller of FlockingSimulation: it supplies the current
StepParameters every frame and draws the returned snapshot.
"""

import json
import math
from dataclasses import replace
from typing import Optional, Tuple

import pygame

from ..core.config import SimulationConfig, StepParameters, DEFAULT_CONFIG
from ..core.flocking import FlockingSimulation
from ..core.vector import Vector3
from ..analysis.metrics import flock_cohesion, mean_speed


# Camera settings
CAMERA_DISTANCE = 1800
FOV = 800

# key -> (parameter name, delta)
KEY_BINDINGS = {
    pygame.K_1: ("separation", -1.0),
    pygame.K_2: ("separation", 1.0),
    pygame.K_3: ("alignment", -5.0),
    pygame.K_4: ("alignment", 5.0),
    pygame.K_5: ("cohesion", -0.5),
    pygame.K_6: ("cohesion", 0.5),
    pygame.K_7: ("momentum", -1.0),
    pygame.K_8: ("momentum", 1.0),
    pygame.K_9: ("fear", -5.0),
    pygame.K_0: ("fear", 5.0),
    pygame.K_F1: ("visualRange", -10.0),
    pygame.K_F2: ("visualRange", 10.0),
    pygame.K_F3: ("predatorVisualRange", -10.0),
    pygame.K_F4: ("predatorVisualRange", 10.0),
    pygame.K_F5: ("predatorSpeed", -10.0),
    pygame.K_F6: ("predatorSpeed", 10.0),
    pygame.K_F7: ("lightAttraction", -0.5),
    pygame.K_F8: ("lightAttraction", 0.5),
}


def adjust_parameter(params: StepParameters, name: str, delta: float) -> StepParameters:
    """
    Return a copy of params with one tunable shifted by delta.

    No range is enforced, matching the simulation's own permissiveness.
    """
    return replace(params, **{name: getattr(params, name) + delta})


class Camera:
    """Perspective camera orbiting the simulation volume."""

    def __init__(self, volume: Tuple[float, float, float], screen_size: Tuple[int, int]):
        """
        Initialize the camera looking at the center of the volume.

        Args:
            volume: (width, height, depth) of the simulation volume
            screen_size: (width, height) of the window in pixels
        """
        width, height, depth = volume
        self.screen_width, self.screen_height = screen_size
        self.target = Vector3(width / 2, height / 2, depth / 2)

        # Diagonal position: back, up, and left
        offset = Vector3(-1, 0.8, -1).normalize().scale(CAMERA_DISTANCE)
        self.position = self.target.add(offset)

        direction = self.target.subtract(self.position).normalize()
        self.yaw = math.atan2(direction.z, direction.x)
        self.pitch = math.asin(direction.y)

        self.move_speed = 20.0
        self.rotate_speed = 0.05

        self._update_vectors()

    def _update_vectors(self) -> None:
        """Update camera basis vectors based on yaw and pitch."""
        self.forward = Vector3(
            math.cos(self.pitch) * math.cos(self.yaw),
            math.sin(self.pitch),
            math.cos(self.pitch) * math.sin(self.yaw)
        ).normalize()

        self.up_ref = Vector3(0, 1, 0)
        self.right = Vector3(*self.forward.cross(self.up_ref)).normalize()
        self.up = Vector3(*self.right.cross(self.forward)).normalize()

    def move(self, direction: str) -> None:
        """Move camera in the named direction."""
        if direction == 'forward':
            self.position.add_ip(self.forward.scale(self.move_speed))
        elif direction == 'backward':
            self.position.subtract_ip(self.forward.scale(self.move_speed))
        elif direction == 'left':
            self.position.subtract_ip(self.right.scale(self.move_speed))
        elif direction == 'right':
            self.position.add_ip(self.right.scale(self.move_speed))
        elif direction == 'up':
            self.position.add_ip(self.up_ref.scale(self.move_speed))
        elif direction == 'down':
            self.position.subtract_ip(self.up_ref.scale(self.move_speed))

    def rotate(self, yaw_delta: float, pitch_delta: float) -> None:
        """Rotate camera by yaw and pitch deltas."""
        self.yaw += yaw_delta * self.rotate_speed
        self.pitch += pitch_delta * self.rotate_speed

        # Clamp pitch to avoid gimbal lock
        self.pitch = max(-math.pi / 2 + 0.1, min(math.pi / 2 - 0.1, self.pitch))

        self._update_vectors()

    def project(self, point: Vector3):
        """
        Project a 3D point to screen coordinates.

        Returns:
            ((screen_x, screen_y), scale), or (None, 0) behind the camera
        """
        to_point = point.subtract(self.position)

        x = to_point.dot(self.right)
        y = to_point.dot(self.up)
        z = to_point.dot(self.forward)

        # Behind camera, too close, or a non-finite agent position
        if z <= 1 or not math.isfinite(x + y + z):
            return None, 0

        scale = FOV / z
        screen_x = int(self.screen_width / 2 + x * scale)
        screen_y = int(self.screen_height / 2 - y * scale)
        return (screen_x, screen_y), scale

    def depth_of(self, point: Vector3) -> float:
        return point.subtract(self.position).norm_squared()


class Viewer:
    """
    Interactive flocking viewer.

    Steps the simulation once per frame with the live StepParameters and
    renders prey, predators, dead prey and the light depth-sorted.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[StepParameters] = None):
        """
        Initialize the viewer.

        Args:
            config: Simulation configuration (uses defaults if None)
            params: Initial step parameters (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        self.params = params if params else StepParameters()

        self.screen = pygame.display.set_mode((self.config.screenWidth, self.config.screenHeight))
        pygame.display.set_caption("Flocking Simulation")
        self.clock = pygame.time.Clock()

        self.camera = Camera((self.config.width, self.config.height, self.config.depth),
                             (self.config.screenWidth, self.config.screenHeight))
        self.reset()

        self.running = True
        self.paused = False

    def reset(self) -> None:
        """Start over with a freshly placed population."""
        self.simulation = FlockingSimulation.from_config(self.config)
        self.state = self.simulation.get_current_state()
        self.stats = {
            "killed": 0,
            "alive": self.simulation.alive_prey_count,
            "avg_speed": 0.0,
            "cohesion": flock_cohesion(self.state),
        }

    def update(self) -> None:
        """Advance the simulation by one step and refresh statistics."""
        if self.paused:
            return
        self.state = self.simulation.step(self.params)
        self.stats["killed"] += self.simulation.deaths_last_step
        self.stats["alive"] = self.simulation.alive_prey_count
        self.stats["avg_speed"] = mean_speed(self.state)
        self.stats["cohesion"] = flock_cohesion(self.state)

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)
        mode = self.config.visualizationMode

        draw_list = []
        for position, heading, is_predator, is_dead in self.state:
            pos_2d, scale = self.camera.project(position)
            if pos_2d:
                draw_list.append((self.camera.depth_of(position), pos_2d, scale,
                                  position, heading, is_predator, is_dead))

        # Painter's algorithm: farthest first
        draw_list.sort(key=lambda item: item[0], reverse=True)

        self._draw_boundary_box()

        for _, pos_2d, scale, position, heading, is_predator, is_dead in draw_list:
            if is_predator:
                color = self.config.predatorColor
                size = max(3, int(7 * scale))
                pygame.draw.circle(self.screen, color, pos_2d, size)
                pygame.draw.circle(self.screen, (255, 100, 100), pos_2d, size, 2)
            elif is_dead:
                pygame.draw.circle(self.screen, self.config.deadColor, pos_2d, max(2, int(3 * scale)))
                continue
            else:
                color = self.config.preyColor
                pygame.draw.circle(self.screen, color, pos_2d, max(2, int(4 * scale)))

            if mode >= 1 and heading.norm() > 0:
                end_2d, _ = self.camera.project(position.add(heading.normalize().scale(15)))
                if end_2d:
                    pygame.draw.line(self.screen, color, pos_2d, end_2d, 1)

        if self.params.useLight:
            light_2d, scale = self.camera.project(self.params.light)
            if light_2d:
                pygame.draw.circle(self.screen, self.config.lightColor, light_2d, max(4, int(10 * scale)))
                if mode >= 2:
                    radius = int(self.params.visualRange * 4 * scale)
                    pygame.draw.circle(self.screen, self.config.lightColor, light_2d, max(1, radius), 1)

        self._draw_stats()
        pygame.display.flip()

    def _draw_boundary_box(self) -> None:
        """Draw the volume as a wireframe box."""
        w, h, d = self.config.width, self.config.height, self.config.depth
        corners = [
            Vector3(0, 0, 0), Vector3(w, 0, 0), Vector3(w, h, 0), Vector3(0, h, 0),
            Vector3(0, 0, d), Vector3(w, 0, d), Vector3(w, h, d), Vector3(0, h, d)
        ]
        edges = [
            (0, 1), (1, 2), (2, 3), (3, 0),  # Front face (z=0)
            (4, 5), (5, 6), (6, 7), (7, 4),  # Back face (z=depth)
            (0, 4), (1, 5), (2, 6), (3, 7)   # Connecting edges
        ]
        projected = [self.camera.project(c)[0] for c in corners]
        for start, end in edges:
            p1, p2 = projected[start], projected[end]
            if p1 and p2:
                pygame.draw.line(self.screen, (50, 50, 60), p1, p2, 1)

    def _draw_stats(self) -> None:
        """Draw statistics and tunables overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10
        p = self.params

        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Step: {self.simulation.step_count}{'  (paused)' if self.paused else ''}",
            f"Prey alive: {self.stats['alive']}",
            f"Killed: {self.stats['killed']}",
            f"Avg Speed: {self.stats['avg_speed']:.1f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
            "",
            f"1/2 Separation: {p.separation:.1f}",
            f"3/4 Alignment: {p.alignment:.1f}",
            f"5/6 Cohesion: {p.cohesion:.1f}",
            f"7/8 Momentum: {p.momentum:.1f}",
            f"9/0 Fear: {p.fear:.1f}",
            f"F1/F2 Visual range: {p.visualRange:.0f}",
            f"F3/F4 Predator range: {p.predatorVisualRange:.0f}",
            f"F5/F6 Predator speed: {p.predatorSpeed:.0f}",
            f"F7/F8 Light attraction: {p.lightAttraction:.1f}",
            f"L Light: {'ON' if p.useLight else 'OFF'}",
        ]
        for text in stats_text:
            surface = font.render(text, True, (200, 200, 200))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 22

    def save_report(self) -> None:
        """Save the current run statistics to JSON."""
        report = {
            "step_count": self.simulation.step_count,
            "prey_count": self.simulation.prey_count,
            "predator_count": self.simulation.predator_count,
            "statistics": self.stats,
            "parameters": self.params.to_dict(),
            "config": self.config.to_dict(),
        }

        try:
            with open(self.config.reportOutputFile, 'w') as f:
                json.dump(report, f, indent=4)
            print(f"Report saved to {self.config.reportOutputFile}")
        except OSError as e:
            print(f"Error saving report: {e}")

    def handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key in KEY_BINDINGS:
            name, delta = KEY_BINDINGS[key]
            self.params = adjust_parameter(self.params, name, delta)
        elif key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.reset()
            print("Simulation reset")
        elif key == pygame.K_l:
            self.params = replace(self.params, useLight=not self.params.useLight)
            print(f"Light: {'ON' if self.params.useLight else 'OFF'}")
        elif key == pygame.K_v:
            self.config.visualizationMode = (self.config.visualizationMode + 1) % 3
        elif key == pygame.K_p:
            self.save_report()

    def _handle_camera(self) -> None:
        """Apply held camera keys."""
        keys = pygame.key.get_pressed()

        # Movement (WASD + Q/E)
        if keys[pygame.K_w]:
            self.camera.move('forward')
        if keys[pygame.K_s]:
            self.camera.move('backward')
        if keys[pygame.K_a]:
            self.camera.move('left')
        if keys[pygame.K_d]:
            self.camera.move('right')
        if keys[pygame.K_q]:
            self.camera.move('down')
        if keys[pygame.K_e]:
            self.camera.move('up')

        # Rotation (Arrow keys)
        yaw_delta = 0
        pitch_delta = 0
        if keys[pygame.K_LEFT]:
            yaw_delta = -1
        if keys[pygame.K_RIGHT]:
            yaw_delta = 1
        if keys[pygame.K_UP]:
            pitch_delta = 1
        if keys[pygame.K_DOWN]:
            pitch_delta = -1

        if yaw_delta != 0 or pitch_delta != 0:
            self.camera.rotate(yaw_delta, pitch_delta)

    def run(self) -> None:
        """Run the viewer main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_keydown(event.key)

            self._handle_camera()
            self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.quit()

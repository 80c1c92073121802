import argparse, json, logging, sys, traceback

from ballistics import sample_path, closest_approach
from config import DEFAULT_CONFIG, default_target, load_config
from models import LaunchParameters
from pitches import DEFAULT_PITCH, DEFAULT_PITCH_CATALOG, launch_for
from solver import TrajectorySolver
from utils import meters_to_feet

logger = logging.getLogger("run")


def excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    try:
        with open("crash_log.txt", "a", encoding="utf-8") as f:
            f.write(msg + "\n")
    except OSError:
        pass
    print("UNHANDLED EXCEPTION\n" + msg, file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a pitch trajectory through a target point.")
    ap.add_argument("--pitch", default=DEFAULT_PITCH, choices=sorted(DEFAULT_PITCH_CATALOG),
                    help="preset supplying speed and breaks")
    ap.add_argument("--speed", type=float, help="release speed, mph")
    ap.add_argument("--ivb", type=float, help="vertical break, inches (positive = up)")
    ap.add_argument("--hb", type=float, help="horizontal break, inches (positive = catcher's right)")
    tx, ty, tz = default_target()
    ap.add_argument("--target-x", type=float, default=tx, help="target x, meters")
    ap.add_argument("--target-y", type=float, default=ty, help="target y, meters")
    ap.add_argument("--target-z", type=float, default=tz, help="target z, meters")
    ap.add_argument("--config", help="JSON file overriding solver config")
    ap.add_argument("--samples", type=int, default=0, help="print this many path samples")
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    ap.add_argument("--serve", action="store_true", help="serve the HTTP API instead of solving once")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def launch_from_args(args) -> LaunchParameters:
    base = launch_for(args.pitch)
    return LaunchParameters(
        base.speed_mph if args.speed is None else args.speed,
        base.vertical_break_in if args.ivb is None else args.ivb,
        base.horizontal_break_in if args.hb is None else args.hb,
    )


def report(sol, samples: int = 0) -> dict:
    out = {
        "status": sol.status.value,
        "reachable": sol.reachable,
        "flight_time": sol.flight_time,
        "estimated_time": sol.estimated_time,
        "release_point": sol.release_point.tolist(),
        "target_point": sol.target_point.tolist(),
        "initial_velocity": sol.initial_velocity.tolist(),
        "acceleration": sol.acceleration.tolist(),
        "end_point": sol.end_point.tolist(),
        "miss_m": sol.miss.tolist(),
    }
    if samples:
        tr = sample_path(sol, samples)
        out["path"] = [[float(t), *p] for t, p in zip(tr.t, tr.points().tolist())]
        t, x, y, z, d = closest_approach(tr, *sol.target_point)
        out["closest_sample"] = {"t": t, "point": [x, y, z], "distance_m": d}
    return out


def format_report(r: dict) -> str:
    tx, ty, tz = r["target_point"]
    lines = [
        f"Status:         {r['status']}" + ("" if r["reachable"] else "  (target not reachable, using estimate)"),
        f"Flight time:    {r['flight_time']:.4f} s (estimate {r['estimated_time']:.4f} s)",
        "Release point:  ({:.3f}, {:.3f}, {:.3f}) m".format(*r["release_point"]),
        f"Target point:   ({tx:.3f}, {ty:.3f}, {tz:.3f}) m  [{meters_to_feet(tx):.2f} ft, {meters_to_feet(ty):.2f} ft]",
        "Velocity:       ({:.3f}, {:.3f}, {:.3f}) m/s".format(*r["initial_velocity"]),
        "Acceleration:   ({:.3f}, {:.3f}, {:.3f}) m/s^2".format(*r["acceleration"]),
        "Miss:           ({:.2e}, {:.2e}, {:.2e}) m".format(*r["miss_m"]),
    ]
    for row in r.get("path", []):
        lines.append("  t={:.4f}  ({:.3f}, {:.3f}, {:.3f})".format(*row))
    return "\n".join(lines)


def serve(host: str, port: int, cfg):
    import uvicorn
    from pitch_server import app as server
    server.configure(cfg)
    uvicorn.run(server.app, host=host, port=port)


def main(argv=None) -> int:
    sys.excepthook = excepthook
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
        launch = launch_from_args(args)
    except (OSError, TypeError, ValueError) as e:
        logger.error("%s", e)
        return 2

    if args.serve:
        serve(args.host, args.port, cfg)
        return 0

    try:
        sol = TrajectorySolver(cfg).solve(launch, (args.target_x, args.target_y, args.target_z))
    except ValueError as e:
        logger.error("%s", e)
        return 2
    r = report(sol, args.samples)
    print(json.dumps(r, indent=2) if args.json else format_report(r))
    return 0 if sol.reachable else 1


if __name__ == "__main__":
    sys.exit(main())

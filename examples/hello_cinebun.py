import time

import cinebun
from cinebun import Tier


def main() -> None:
    srv = cinebun.run(port=0, new_server=True)
    print(f"cinebun running at {srv.url}")

    now = time.time_ns()
    srv.register("matinee-0930", Tier.GLAZE, now)
    srv.register("matinee-1145", Tier.FONDANT, now)

    # The same registry is reachable over HTTP.
    client = srv.as_client()
    client.register_slot("premiere-2359", Tier.SPRINKLE)

    for slot_id in sorted(client.all_slot_ids()):
        settle = client.get_settlement_epoch(slot_id)
        print(f"{slot_id}: settles at {settle} (cooling done: {client.is_cooling_complete(slot_id)})")

    print(f"active={client.active_count()} fingerprint={client.fingerprint()}")
    srv.stop()


if __name__ == "__main__":
    main()

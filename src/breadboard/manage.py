"""Breadboard management CLI.

Usage:
    breadboard serve [--host 0.0.0.0] [--port 8000] [--no-seed] [--no-faults]
    breadboard seed-summary
"""

import argparse
import sys


def serve(host: str, port: int, seed: bool = True, faults: bool = True):
    """Run the storefront API under uvicorn."""
    import uvicorn

    from breadboard.app import create_app
    from breadboard.config import configure

    if not faults:
        configure(faults_enabled=False)

    uvicorn.run(create_app(seed=seed), host=host, port=port)


def seed_summary():
    """Load the seed data into a fresh in-memory store and print what it holds."""
    from breadboard.catalogue.moq import get_policy
    from breadboard.catalogue.product import Product
    from breadboard.catalogue.queries import category_names
    from breadboard.domain import breadboard
    from breadboard.identity.address import list_addresses
    from breadboard.identity.user import User
    from breadboard.ordering.order.order import Order
    from breadboard.seed import seed_storefront

    breadboard.init()
    with breadboard.domain_context():
        seed_storefront()

        names = category_names()
        print(f"Categories ({len(names)}): {', '.join(sorted(names.values()))}")

        policy = get_policy()
        products = breadboard.repository_for(Product).all_products()
        print(f"Products: {len(products)}")
        for product in products:
            rule = policy.resolve(product.sku)
            print(
                f"  {product.sku:<14} {product.name:<34} ${product.price:>6.2f}"
                f"  stock {product.inventory:>4}  min {rule.min_order_qty} / step {rule.increment}"
            )

        users = breadboard.repository_for(User).all_users()
        print(f"Users: {len(users)}")
        for user in users:
            print(f"  {user.email} ({user.role})")

        print(f"Delivery addresses: {len(list_addresses())}")

        print("Orders:")
        for user in users:
            for order in breadboard.repository_for(Order).for_user(user.id):
                print(f"  {order.order_number}  {order.status:<10} ${order.total:>8.2f}  {user.company_name}")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Breadboard storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--no-seed", action="store_true", help="Start with an empty store")
    serve_parser.add_argument("--no-faults", action="store_true", help="Disable delay and failure injection")

    subparsers.add_parser("seed-summary", help="Print the seeded catalogue, accounts and orders")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port, seed=not args.no_seed, faults=not args.no_faults)
    elif args.command == "seed-summary":
        seed_summary()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

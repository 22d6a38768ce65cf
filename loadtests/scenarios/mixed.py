"""Mixed storefront workload scenario.

Combines anonymous browsing, sign-ups and signed-in ordering with weights
that model wholesale storefront traffic. This is the recommended scenario
for load baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.catalogue import BrowseCatalogue
from loadtests.scenarios.identity import NewBuyerJourney
from loadtests.scenarios.ordering import CartAbandonmentJourney, CheckoutJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Browsing dominates, most carts are abandoned, and a smaller share of
    buyers pay and place orders. All signed-in journeys share the demo
    buyer, which exercises per-user serialization of cart writes and the
    shared order number sequence under load.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogue: 10,
        NewBuyerJourney: 2,
        CartAbandonmentJourney: 4,
        CheckoutJourney: 2,
    }

import unittest
from fastapi.testclient import TestClient
from tiffin.api.api_run import app


class TestPlansAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_meal_types(self):
        resp = self.client.get('/api/meal-types')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['meal_types'], {'veg': 80, 'nonveg': 120, 'jain': 90})
        self.assertEqual(data['default_meal_type'], 'veg')
        self.assertEqual(data['default_days'], 30)

    def test_create_plan(self):
        resp = self.client.post('/api/plans', json={'name': 'Rahul'})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {
            'name': 'Rahul', 'meal_type': 'veg', 'days': 30, 'daily_rate': 80, 'total_cost': 2400,
        })

    def test_create_plan_rejected(self):
        for body in ({'name': ''}, {'name': 'X', 'meal_type': 'vegan'}, ['Rahul']):
            resp = self.client.post('/api/plans', json=body)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json()['error'], 'Invalid plan input')

    def test_summary(self):
        plans = [
            self.client.post('/api/plans', json={'name': 'A'}).json(),
            self.client.post('/api/plans', json={'name': 'B', 'meal_type': 'nonveg', 'days': 25}).json(),
            self.client.post('/api/plans', json={'name': 'C', 'days': 20}).json(),
        ]
        resp = self.client.post('/api/plans/summary', json=plans)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {
            'total_customers': 3, 'total_revenue': 7000, 'meal_breakdown': {'veg': 2, 'nonveg': 1},
        })

    def test_summary_rejected(self):
        resp = self.client.post('/api/plans/summary', json=[])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'No plans supplied')
        resp = self.client.post('/api/plans/summary', json={'name': 'A'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'Plans must be a list of objects')

    def test_summary_rejects_bad_plan_fields(self):
        bad_plans = (
            {'name': 'A', 'meal_type': 'veg', 'total_cost': '2400'},
            {'name': 'A', 'meal_type': 'veg', 'total_cost': None},
            {'name': 'A', 'meal_type': ['veg'], 'total_cost': 2400},
            {'name': 'A', 'meal_type': {'veg': 1}, 'total_cost': 2400},
        )
        for bad in bad_plans:
            good = {'name': 'B', 'meal_type': 'nonveg', 'total_cost': 3000}
            resp = self.client.post('/api/plans/summary', json=[good, bad])
            self.assertEqual(resp.status_code, 400, bad)
            self.assertEqual(resp.json()['error'], 'Plans must be a list of objects')

    def test_summary_accepts_extra_and_missing_fields(self):
        resp = self.client.post('/api/plans/summary', json=[
            {'meal_type': 'veg', 'customer_id': 'C-1'},
            {'total_cost': 100.5},
        ])
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['total_customers'], 2)
        self.assertEqual(data['total_revenue'], 100.5)
        self.assertEqual(data['meal_breakdown']['veg'], 1)

    def test_apply_addons_skips_infinite_price(self):
        body = (
            '{"plan": {"name": "A", "meal_type": "veg", "days": 10, "daily_rate": 80, "total_cost": 800},'
            ' "addons": [{"name": "raita", "price": 15}, {"name": "gold", "price": Infinity}]}'
        )
        resp = self.client.post('/api/plans/addons', content=body, headers={'Content-Type': 'application/json'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['addon_names'], ['raita'])
        self.assertEqual(data['total_cost'], 950)

    def test_apply_addons(self):
        plan = {'name': 'A', 'meal_type': 'veg', 'days': 10, 'daily_rate': 80, 'total_cost': 800}
        resp = self.client.post('/api/plans/addons', json={
            'plan': plan,
            'addons': [{'name': 'raita', 'price': 15}, {'name': 'bad'}],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['daily_rate'], 95)
        self.assertEqual(data['total_cost'], 950)
        self.assertEqual(data['addon_names'], ['raita'])

    def test_apply_addons_without_plan(self):
        resp = self.client.post('/api/plans/addons', json={'addons': [{'name': 'raita', 'price': 15}]})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'Invalid base plan')


if __name__ == '__main__':
    unittest.main()

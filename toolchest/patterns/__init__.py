"""Short working examples of structural and behavioural design patterns."""
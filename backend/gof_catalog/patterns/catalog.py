# backend/gof_catalog/patterns/catalog.py
"""
Pattern Catalog - The 23 Gang-of-Four patterns

Mirrors the overview index of the pattern write-ups.
"""

from gof_catalog.patterns.registry import Category, PatternEntry


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

ABSTRACT_FACTORY = PatternEntry(
    name="Abstract Factory",
    category=Category.CREATIONAL,
    summary="Provide an interface for creating families of related objects without specifying their concrete classes.",
    example="Regional pizza stores sourcing dough, sauce and cheese from an ingredient factory",
    aliases=("Kit",),
)

BUILDER = PatternEntry(
    name="Builder",
    category=Category.CREATIONAL,
    summary="Separate the construction of a complex object from its representation so the same process can create different representations.",
    example="A house builder assembling foundation, walls and roof step by step",
)

FACTORY_METHOD = PatternEntry(
    name="Factory Method",
    category=Category.CREATIONAL,
    summary="Define an interface for creating an object but let subclasses decide which class to instantiate.",
    example="A pizza store whose subclasses decide which pizza to create",
    aliases=("Virtual Constructor",),
)

PROTOTYPE = PatternEntry(
    name="Prototype",
    category=Category.CREATIONAL,
    summary="Create new objects by copying a prototypical instance.",
    example="Cloning pre-configured shapes instead of building them from scratch",
)

SINGLETON = PatternEntry(
    name="Singleton",
    category=Category.CREATIONAL,
    summary="Ensure a class has only one instance and provide a global point of access to it.",
    example="A single shared configuration or logger object",
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER = PatternEntry(
    name="Adapter",
    category=Category.STRUCTURAL,
    summary="Convert the interface of a class into another interface clients expect.",
    example="Wrapping a legacy media player behind a new playback interface",
    aliases=("Wrapper",),
)

BRIDGE = PatternEntry(
    name="Bridge",
    category=Category.STRUCTURAL,
    summary="Decouple an abstraction from its implementation so the two can vary independently.",
    example="Remote controls working against interchangeable device implementations",
    aliases=("Handle/Body",),
)

COMPOSITE = PatternEntry(
    name="Composite",
    category=Category.STRUCTURAL,
    summary="Compose objects into tree structures and let clients treat individual objects and compositions uniformly.",
    example="Menus containing menu items and nested sub-menus",
)

DECORATOR = PatternEntry(
    name="Decorator",
    category=Category.STRUCTURAL,
    summary="Attach additional responsibilities to an object dynamically as a flexible alternative to subclassing.",
    example="A flower bouquet wrapped with ribbons, glitter and paper at checkout",
    aliases=("Wrapper",),
)

FACADE = PatternEntry(
    name="Facade",
    category=Category.STRUCTURAL,
    summary="Provide a unified, higher-level interface to a set of interfaces in a subsystem.",
    example="A home theater facade driving the amplifier, projector and lights",
)

FLYWEIGHT = PatternEntry(
    name="Flyweight",
    category=Category.STRUCTURAL,
    summary="Use sharing to support large numbers of fine-grained objects efficiently.",
    example="Sharing glyph objects across every character in a document",
)

PROXY = PatternEntry(
    name="Proxy",
    category=Category.STRUCTURAL,
    summary="Provide a surrogate or placeholder for another object to control access to it.",
    example="A report-generator proxy that checks permissions before generating reports",
    aliases=("Surrogate",),
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

CHAIN_OF_RESPONSIBILITY = PatternEntry(
    name="Chain of Responsibility",
    category=Category.BEHAVIORAL,
    summary="Pass a request along a chain of handlers until one of them handles it.",
    example="Support tickets escalating from first line to engineering",
)

COMMAND = PatternEntry(
    name="Command",
    category=Category.BEHAVIORAL,
    summary="Encapsulate a request as an object, allowing parameterization, queuing, logging and undo.",
    example="Remote control buttons bound to undoable command objects",
    aliases=("Action", "Transaction"),
)

INTERPRETER = PatternEntry(
    name="Interpreter",
    category=Category.BEHAVIORAL,
    summary="Define a representation for a grammar along with an interpreter that uses it to interpret sentences.",
    example="Evaluating simple arithmetic expressions from a syntax tree",
)

ITERATOR = PatternEntry(
    name="Iterator",
    category=Category.BEHAVIORAL,
    summary="Access the elements of an aggregate sequentially without exposing its underlying representation.",
    example="Walking two restaurant menus stored in different collections",
    aliases=("Cursor",),
)

MEDIATOR = PatternEntry(
    name="Mediator",
    category=Category.BEHAVIORAL,
    summary="Define an object that encapsulates how a set of objects interact, promoting loose coupling.",
    example="An air traffic control tower coordinating aircraft",
)

MEMENTO = PatternEntry(
    name="Memento",
    category=Category.BEHAVIORAL,
    summary="Capture and externalize an object's internal state so it can be restored later without violating encapsulation.",
    example="Saving and restoring editor snapshots for undo",
    aliases=("Token",),
)

OBSERVER = PatternEntry(
    name="Observer",
    category=Category.BEHAVIORAL,
    summary="Define a one-to-many dependency so that when one object changes state all its dependents are notified.",
    example="Weather station displays updating on new measurements",
    aliases=("Dependents", "Publish-Subscribe"),
)

STATE = PatternEntry(
    name="State",
    category=Category.BEHAVIORAL,
    summary="Allow an object to alter its behavior when its internal state changes.",
    example="A gumball machine moving between sold-out, has-quarter and sold states",
    aliases=("Objects for States",),
)

STRATEGY = PatternEntry(
    name="Strategy",
    category=Category.BEHAVIORAL,
    summary="Define a family of algorithms, encapsulate each one and make them interchangeable.",
    example="Ducks with swappable fly and quack behaviors",
    aliases=("Policy",),
)

TEMPLATE_METHOD = PatternEntry(
    name="Template Method",
    category=Category.BEHAVIORAL,
    summary="Define the skeleton of an algorithm in an operation, deferring some steps to subclasses.",
    example="Brewing tea and coffee through a shared caffeine-beverage recipe",
)

VISITOR = PatternEntry(
    name="Visitor",
    category=Category.BEHAVIORAL,
    summary="Represent an operation to be performed on the elements of an object structure without changing their classes.",
    example="Computing prices and taxes over a shopping cart of heterogeneous items",
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

PATTERN_CATALOG = (
    # Creational
    ABSTRACT_FACTORY,
    BUILDER,
    FACTORY_METHOD,
    PROTOTYPE,
    SINGLETON,
    # Structural
    ADAPTER,
    BRIDGE,
    COMPOSITE,
    DECORATOR,
    FACADE,
    FLYWEIGHT,
    PROXY,
    # Behavioral
    CHAIN_OF_RESPONSIBILITY,
    COMMAND,
    INTERPRETER,
    ITERATOR,
    MEDIATOR,
    MEMENTO,
    OBSERVER,
    STATE,
    STRATEGY,
    TEMPLATE_METHOD,
    VISITOR,
)
